"""Tests for the httpx page fetcher."""

import httpx
import pytest

from supplier_scraper.fetcher import DEFAULT_HEADERS, DEFAULT_TIMEOUT, FetchError, PageFetcher, parse_page


def make_fetcher(handler) -> PageFetcher:
    return PageFetcher(transport=httpx.MockTransport(handler))


class TestParsePage:
    """Tests for parse_page."""

    def test_parses_html(self):
        page = parse_page("https://example.com/a", "<html><body><h1>Hi</h1></body></html>")
        assert page.url == "https://example.com/a"
        assert page.soup.select_one("h1").get_text() == "Hi"

    @pytest.mark.parametrize("body", ["", "   \n"])
    def test_empty_body_raises(self, body):
        with pytest.raises(FetchError, match="Empty document"):
            parse_page("https://example.com/a", body)


class TestPageFetcher:
    """Tests for PageFetcher.fetch."""

    def test_defaults(self):
        fetcher = PageFetcher()
        assert fetcher.timeout == DEFAULT_TIMEOUT
        assert fetcher.headers == DEFAULT_HEADERS

    @pytest.mark.asyncio
    async def test_fetch_success(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html><h1>Suppliers</h1></html>")

        async with make_fetcher(handler) as fetcher:
            page = await fetcher.fetch("https://example.com/suppliers")

        assert page.url == "https://example.com/suppliers"
        assert page.soup.h1.get_text() == "Suppliers"

    @pytest.mark.asyncio
    async def test_sends_user_agent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["ua"] = request.headers.get("user-agent")
            return httpx.Response(200, text="<html></html>")

        async with make_fetcher(handler) as fetcher:
            await fetcher.fetch("https://example.com/")

        assert seen["ua"] == DEFAULT_HEADERS["User-Agent"]

    @pytest.mark.asyncio
    async def test_follows_redirects_and_reports_final_url(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/start":
                return httpx.Response(302, headers={"location": "https://example.com/final"})
            return httpx.Response(200, text="<html><p>done</p></html>")

        async with make_fetcher(handler) as fetcher:
            page = await fetcher.fetch("https://example.com/start")

        assert page.url == "https://example.com/final"

    @pytest.mark.asyncio
    async def test_not_found_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="missing")

        async with make_fetcher(handler) as fetcher:
            with pytest.raises(FetchError, match="HTTP 404"):
                await fetcher.fetch("https://example.com/missing")

    @pytest.mark.asyncio
    async def test_rate_limited_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429)

        async with make_fetcher(handler) as fetcher:
            with pytest.raises(FetchError, match="Rate limited"):
                await fetcher.fetch("https://example.com/")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_fetcher(handler) as fetcher:
            with pytest.raises(FetchError, match="HTTP error"):
                await fetcher.fetch("https://example.com/")

    @pytest.mark.asyncio
    async def test_empty_body_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="")

        async with make_fetcher(handler) as fetcher:
            with pytest.raises(FetchError, match="Empty document"):
                await fetcher.fetch("https://example.com/")

    @pytest.mark.asyncio
    async def test_fetch_outside_context_raises(self):
        fetcher = PageFetcher()
        with pytest.raises(RuntimeError):
            await fetcher.fetch("https://example.com/")

    @pytest.mark.asyncio
    async def test_client_closed_on_exit(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html></html>")

        fetcher = make_fetcher(handler)
        async with fetcher:
            assert fetcher._client is not None
        assert fetcher._client is None
