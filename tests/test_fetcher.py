"""Tests for downloading and normalizing JavaScript files."""

import asyncio

import aiohttp
import pytest
from aioresponses import aioresponses

from revelio.core.config import Config
from revelio.core.exceptions import DecodeError, FetchError
from revelio.core.fetcher import JsFetcher

from tests.conftest import JS_URL


@pytest.mark.unit
class TestJsFetcher:

    @pytest.mark.asyncio
    async def test_fetch_returns_text(self):
        with aioresponses() as m:
            m.get(JS_URL, status=200, body='var a="x";', content_type='application/javascript')
            async with aiohttp.ClientSession() as session:
                text = await JsFetcher(session, Config(timeout=5)).fetch(JS_URL)
        assert text == 'var a="x";'

    @pytest.mark.asyncio
    async def test_normalize_beautifies(self):
        with aioresponses() as m:
            m.get(JS_URL, status=200, body='var a="x";var b="y";')
            async with aiohttp.ClientSession() as session:
                source = await JsFetcher(session).normalize(JS_URL)
        assert source.splitlines() == ['var a = "x";', 'var b = "y";']

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [403, 404, 500])
    async def test_non_success_status(self, status):
        with aioresponses() as m:
            m.get(JS_URL, status=status, body='nope')
            async with aiohttp.ClientSession() as session:
                with pytest.raises(FetchError, match=f"HTTP {status}"):
                    await JsFetcher(session).fetch(JS_URL)

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        with aioresponses() as m:
            m.get(JS_URL, exception=aiohttp.ClientConnectionError("Connection refused"))
            async with aiohttp.ClientSession() as session:
                with pytest.raises(FetchError) as exc_info:
                    await JsFetcher(session).fetch(JS_URL)
        assert "Connection refused" in str(exc_info.value)
        assert exc_info.value.url == JS_URL

    @pytest.mark.asyncio
    async def test_timeout(self):
        with aioresponses() as m:
            m.get(JS_URL, exception=asyncio.TimeoutError())
            async with aiohttp.ClientSession() as session:
                with pytest.raises(FetchError, match="Timeout"):
                    await JsFetcher(session).fetch(JS_URL)

    @pytest.mark.asyncio
    async def test_undecodable_body(self):
        with aioresponses() as m:
            m.get(JS_URL, status=200, body=b'\xff\xfe\xfa\x00var',
                  content_type='application/javascript; charset=utf-8')
            async with aiohttp.ClientSession() as session:
                with pytest.raises(DecodeError):
                    await JsFetcher(session).fetch(JS_URL)

    @pytest.mark.asyncio
    async def test_unknown_charset(self):
        with aioresponses() as m:
            m.get(JS_URL, status=200, body='var a="x";',
                  content_type='application/javascript; charset=not-a-charset')
            async with aiohttp.ClientSession() as session:
                with pytest.raises(DecodeError):
                    await JsFetcher(session).fetch(JS_URL)

    @pytest.mark.asyncio
    async def test_declared_charset_is_used(self):
        body = 'var s="caf\xe9";'.encode('latin-1')
        with aioresponses() as m:
            m.get(JS_URL, status=200, body=body,
                  content_type='application/javascript; charset=latin-1')
            async with aiohttp.ClientSession() as session:
                text = await JsFetcher(session).fetch(JS_URL)
        assert text == 'var s="caf\xe9";'

    @pytest.mark.asyncio
    async def test_client_error_message_is_kept_whole(self):
        reason = "Cannot connect to host target.example:443 ssl:default [Connection refused]"
        with aioresponses() as m:
            m.get(JS_URL, exception=aiohttp.ClientConnectionError(reason))
            async with aiohttp.ClientSession() as session:
                with pytest.raises(FetchError) as exc_info:
                    await JsFetcher(session).fetch(JS_URL)
        assert exc_info.value.reason == f"Client error: {reason}"

    @pytest.mark.asyncio
    async def test_beautifier_failure_falls_back_to_raw_source(self, monkeypatch):
        def broken_beautifier(content, options):
            raise RuntimeError("beautifier crashed")

        monkeypatch.setattr("revelio.core.fetcher.beautify_source", broken_beautifier)
        with aioresponses() as m:
            m.get(JS_URL, status=200, body='var a="x";var b="y";')
            async with aiohttp.ClientSession() as session:
                source = await JsFetcher(session).normalize(JS_URL)
        assert source == 'var a="x";var b="y";'

    @pytest.mark.asyncio
    async def test_default_config_reads_environment(self, monkeypatch):
        monkeypatch.setenv("REVELIO_TIMEOUT", "7.5")
        async with aiohttp.ClientSession() as session:
            fetcher = JsFetcher(session)
        assert fetcher.config.timeout == 7.5
