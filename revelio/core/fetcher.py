"""
JavaScript retrieval.
Downloads one file per URL and hands back beautified source text.
"""

import asyncio
from typing import Optional

import aiohttp

from revelio.core.beautifier import beautify_source
from revelio.core.config import Config, get_default_config
from revelio.core.exceptions import DecodeError, FetchError
from revelio.core.logger import logger


class JsFetcher:

    def __init__(self, session: aiohttp.ClientSession, config: Optional[Config] = None):
        self.session = session
        self.config = config or get_default_config()

    async def fetch(self, url: str) -> str:
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)

        try:
            async with self.session.get(url, timeout=timeout) as response:
                if not 200 <= response.status < 300:
                    raise FetchError(url, f"HTTP {response.status}")

                raw_content = await response.read()
                charset = response.charset or 'utf-8'

        except asyncio.TimeoutError:
            raise FetchError(url, "Timeout")
        except aiohttp.ClientError as e:
            raise FetchError(url, f"Client error: {str(e) or type(e).__name__}")

        try:
            return raw_content.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            raise DecodeError(url, f"Could not decode response as {charset}: {e}")

    async def normalize(self, url: str) -> str:
        content = await self.fetch(url)
        logger.debug(f"Fetched {len(content)} characters from {url}")
        loop = asyncio.get_running_loop()
        try:
            # beautifying runs in a worker thread, never on the event loop
            return await loop.run_in_executor(None, beautify_source, content, self.config.beautify)
        except Exception as e:
            logger.debug(f"Beautifier failed on {url}, scanning raw source: {e}")
            return content
