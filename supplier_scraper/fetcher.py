"""HTTP page fetcher wrapping httpx with project-specific defaults."""

import logging
from dataclasses import dataclass
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Default request settings
DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; supplier-scraper/0.1)",
    "Accept": "text/html,application/xhtml+xml",
}


class FetchError(Exception):
    """Raised when a page cannot be fetched or parsed."""


@dataclass
class Page:
    """A fetched and parsed HTML page."""

    url: str
    soup: BeautifulSoup

    def absolute_url(self, href: str) -> str | None:
        """Resolve href against the page URL, or None if href is malformed."""
        try:
            return urljoin(self.url, href)
        except ValueError as e:
            logger.debug(f"Skipping malformed link {href!r} on {self.url}: {e}")
            return None


def parse_page(url: str, html: str) -> Page:
    """Parse raw HTML into a Page.

    Args:
        url: Final URL of the document, used to resolve relative links.
        html: Raw HTML body.

    Returns:
        Parsed Page.

    Raises:
        FetchError: If the body is empty.
    """
    if not html or not html.strip():
        raise FetchError(f"Empty document returned for {url}")
    return Page(url=url, soup=BeautifulSoup(html, "html.parser"))


class PageFetcher:
    """Fetches pages one at a time over a shared httpx client.

    Use as an async context manager so the underlying client is closed:

        async with PageFetcher() as fetcher:
            page = await fetcher.fetch(url)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.headers = headers or dict(DEFAULT_HEADERS)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "PageFetcher":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> Page:
        """Fetch a URL and parse the response body as HTML.

        Args:
            url: Absolute URL to fetch.

        Returns:
            Parsed Page whose url is the final URL after redirects.

        Raises:
            FetchError: On transport errors, non-200 responses or empty bodies.
        """
        if self._client is None:
            raise RuntimeError("PageFetcher must be used as an async context manager")

        logger.debug(f"Fetching {url}")
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"HTTP error fetching {url}: {e}") from e

        if response.status_code == 429:
            raise FetchError(f"Rate limited while fetching {url}")
        if response.status_code != 200:
            raise FetchError(f"Failed to fetch {url}: HTTP {response.status_code}")

        return parse_page(str(response.url), response.text)
