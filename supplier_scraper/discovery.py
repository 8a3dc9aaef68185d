"""Listing URL discovery from the directory's A-Z navigation."""

import logging

from supplier_scraper.fetcher import Page
from supplier_scraper.models import Selectors

logger = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """Raised when the navigation index cannot be found on the root page."""


def discover_listing_urls(page: Page, selectors: Selectors) -> list[str]:
    """Collect the listing root URL of every navigation link on the root page.

    Links are resolved against the page URL and returned in document order.
    Duplicates are kept.

    Args:
        page: The directory's landing page.
        selectors: Directory selectors; only ``navigation`` is used.

    Returns:
        List of absolute listing URLs, one per navigation link.

    Raises:
        DiscoveryError: If the navigation container is missing.
    """
    nav = page.soup.select_one(selectors.navigation)
    if nav is None:
        raise DiscoveryError(
            f"Navigation '{selectors.navigation}' not found on {page.url} - page format may have changed"
        )

    urls = []
    for link in nav.select("a[href]"):
        url = page.absolute_url(str(link["href"]))
        if url is not None:
            urls.append(url)
    logger.info(f"Discovered {len(urls)} listing URLs from {page.url}")
    return urls
