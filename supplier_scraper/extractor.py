"""Supplier detail page extraction."""

import logging
import re

from bs4 import BeautifulSoup

from supplier_scraper.fetcher import FetchError, Page, PageFetcher
from supplier_scraper.models import Record, Selectors

logger = logging.getLogger(__name__)

# Contact block type markers
TELEPHONE = "telephone"
EMAIL = "email"


class ExtractionError(Exception):
    """Raised when a supplier page has no name or cannot be fetched."""


def _clean_text(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return re.sub(r"\s+", " ", text).strip()


def _select_text(soup: BeautifulSoup, selector: str) -> str | None:
    """Return the cleaned text of the first match, or None if nothing matches."""
    element = soup.select_one(selector)
    if element is None:
        return None
    return _clean_text(element.get_text())


def parse_record(page: Page, selectors: Selectors) -> Record:
    """Build a Record from a supplier detail page.

    Optional fields are None when their element is absent. The first contact
    block is a label and is skipped; the remaining blocks are typed by the
    ``contact_type_attr`` of their first span.

    Args:
        page: A fetched supplier page.
        selectors: Directory selectors.

    Returns:
        The extracted Record.

    Raises:
        ExtractionError: If the supplier name is missing or blank.
    """
    soup = page.soup

    name = _select_text(soup, selectors.name)
    if not name:
        raise ExtractionError(f"No supplier name ('{selectors.name}') on {page.url}")

    description = _select_text(soup, selectors.description)
    contact_name = _select_text(soup, selectors.contact_name)

    telephone = None
    email = None
    for block in soup.select(selectors.contact_block)[1:]:
        marker = block.find("span")
        if marker is None:
            continue
        kind = marker.get(selectors.contact_type_attr)
        if kind == TELEPHONE:
            telephone = _clean_text(block.get_text())
        elif kind == EMAIL:
            email = _clean_text(block.get_text())
        else:
            logger.debug(f"Ignoring contact block of type {kind!r} on {page.url}")

    return Record(
        name=name,
        contact_name=contact_name,
        contact_telephone=telephone,
        contact_email=email,
        description=description,
    )


class DetailExtractor:
    """Fetches supplier pages and extracts one Record each."""

    def __init__(self, fetcher: PageFetcher, selectors: Selectors) -> None:
        self.fetcher = fetcher
        self.selectors = selectors

    async def extract_record(self, entity_url: str) -> Record:
        """Fetch a supplier page and extract its Record.

        Raises:
            ExtractionError: If the page cannot be fetched or has no name.
        """
        logger.info(f"Fetching supplier details for {entity_url}")
        try:
            page = await self.fetcher.fetch(entity_url)
        except FetchError as e:
            raise ExtractionError(str(e)) from e
        return parse_record(page, self.selectors)
