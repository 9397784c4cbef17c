"""
Extraction Runner - drives the fetch -> normalize -> extract pipeline.
Every URL is an isolated unit of work: a failed download becomes an error
entry in the report and never stops the remaining URLs.
"""

import asyncio
from typing import Iterable, List, Optional

import aiohttp

from revelio.core.config import Config, get_default_config
from revelio.core.exceptions import FetchError
from revelio.core.extractor import VariableExtractor
from revelio.core.fetcher import JsFetcher
from revelio.core.logger import logger
from revelio.models import ExtractionRequest, UrlResult


class ExtractionRunner:

    def __init__(
        self,
        config: Optional[Config] = None,
        extractor: Optional[VariableExtractor] = None
    ):
        self.config = config or get_default_config()
        self.extractor = extractor or VariableExtractor()

    async def _process_url(self, url: str, request: ExtractionRequest, fetcher: JsFetcher) -> UrlResult:
        try:
            source = await fetcher.normalize(url)
        except FetchError as e:
            logger.warning(f"Error fetching or processing the JavaScript from {url}: {e}")
            return UrlResult.failure(url, str(e))

        findings = self.extractor.extract(
            source,
            request.mode,
            variables=request.variables,
            filters=request.filters,
            min_length=request.min_length
        )
        logger.info(f"Found {len(findings)} variables for URL: {url}")
        return UrlResult(url=url, findings=tuple(findings))

    async def run_async(self, request: ExtractionRequest) -> List[UrlResult]:
        logger.debug(
            f"Processing {len(request.urls)} URL(s) in {request.mode.value} mode "
            f"with concurrency {self.config.max_concurrent}"
        )

        semaphore = asyncio.Semaphore(self.config.max_concurrent)

        async def bounded_process(url: str, fetcher: JsFetcher) -> UrlResult:
            async with semaphore:
                return await self._process_url(url, request, fetcher)

        connector = aiohttp.TCPConnector(limit=self.config.max_concurrent, ttl_dns_cache=300)

        async with aiohttp.ClientSession(
            connector=connector,
            headers=self.config.request_headers()
        ) as session:
            fetcher = JsFetcher(session, self.config)
            tasks = [bounded_process(url, fetcher) for url in request.urls]
            results = await asyncio.gather(*tasks)

        failed = sum(1 for r in results if not r.ok)
        logger.debug(f"Completed {len(results)} URL(s), {failed} failed")
        return list(results)

    def run(self, request: ExtractionRequest) -> List[UrlResult]:
        return asyncio.run(self.run_async(request))

    def dictionary(self, urls: Iterable[str], variables: Iterable[str]) -> List[UrlResult]:
        return self.run(ExtractionRequest.dictionary(urls, variables))

    def enumerate(
        self,
        urls: Iterable[str],
        filters: Iterable[str] = (),
        min_length: int = 0
    ) -> List[UrlResult]:
        return self.run(ExtractionRequest.enumeration(urls, filters, min_length))
