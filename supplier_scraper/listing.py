"""Listing page crawling: supplier links and the next-page link."""

import logging
from dataclasses import dataclass, field

from bs4 import Tag

from supplier_scraper.fetcher import FetchError, Page, PageFetcher
from supplier_scraper.models import Selectors

logger = logging.getLogger(__name__)


class ListingFetchError(Exception):
    """Raised when a listing page cannot be fetched or parsed."""


@dataclass
class ListingPage:
    """Supplier links found on one listing page."""

    entity_urls: list[str] = field(default_factory=list)
    next_url: str | None = None


def _first_link(element: Tag) -> Tag | None:
    """Return the element itself if it is a link, else its first descendant link."""
    if element.name == "a" and element.get("href"):
        return element
    return element.select_one("a[href]")


def parse_listing(page: Page, selectors: Selectors) -> ListingPage:
    """Extract supplier URLs and the next-page URL from a listing page.

    Args:
        page: A fetched listing page.
        selectors: Directory selectors.

    Returns:
        ListingPage with absolute URLs in document order.
    """
    entity_urls = []
    for title in page.soup.select(selectors.result_title):
        link = _first_link(title)
        if link is None:
            logger.debug(f"Result title without link on {page.url}: {title.get_text(strip=True)!r}")
            continue
        url = page.absolute_url(str(link["href"]))
        if url is not None:
            entity_urls.append(url)

    next_url = None
    next_control = page.soup.select_one(selectors.next_page)
    if next_control is not None:
        link = _first_link(next_control)
        if link is not None:
            next_url = page.absolute_url(str(link["href"]))

    return ListingPage(entity_urls=entity_urls, next_url=next_url)


class ListingCrawler:
    """Fetches listing pages and parses them into ListingPage results."""

    def __init__(self, fetcher: PageFetcher, selectors: Selectors) -> None:
        self.fetcher = fetcher
        self.selectors = selectors

    async def list_entities(self, page_url: str) -> ListingPage:
        """Fetch a listing page and return its supplier URLs and next-page URL.

        Raises:
            ListingFetchError: If the page cannot be fetched.
        """
        logger.info(f"Fetching supplier URLs for page {page_url}")
        try:
            page = await self.fetcher.fetch(page_url)
        except FetchError as e:
            raise ListingFetchError(str(e)) from e

        listing = parse_listing(page, self.selectors)
        logger.debug(
            f"Listing {page_url}: {len(listing.entity_urls)} suppliers, next={listing.next_url}"
        )
        return listing
