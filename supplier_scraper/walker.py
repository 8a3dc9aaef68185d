"""Pagination walker driving listing crawls and detail extraction."""

import logging
from dataclasses import dataclass

from supplier_scraper.extractor import DetailExtractor, ExtractionError
from supplier_scraper.listing import ListingCrawler, ListingFetchError
from supplier_scraper.store import RecordStore

logger = logging.getLogger(__name__)

# Upper bound on listing pages followed from one listing root
DEFAULT_MAX_PAGES = 500


@dataclass
class CrawlStats:
    """Counters accumulated across every walk of one crawl."""

    listing_pages: int = 0
    listing_failures: int = 0
    entities_seen: int = 0
    records_stored: int = 0
    records_replaced: int = 0
    entities_skipped: int = 0
    truncated_listings: int = 0

    @property
    def unique_records(self) -> int:
        """Records left after later upserts replaced earlier ones of the same name."""
        return self.records_stored - self.records_replaced

    def summary(self) -> str:
        return (
            f"{self.unique_records} records from {self.entities_seen} suppliers "
            f"on {self.listing_pages} listing pages; "
            f"{self.records_replaced} duplicate names replaced, "
            f"{self.entities_skipped} suppliers skipped, "
            f"{self.listing_failures} listing pages failed, "
            f"{self.truncated_listings} listings truncated"
        )


class PaginationWalker:
    """Follows a listing's next-page chain, storing a Record per supplier.

    The chain is walked iteratively. A failed listing page ends its chain;
    a failed supplier page is skipped. Neither error propagates.
    """

    def __init__(
        self,
        listing_crawler: ListingCrawler,
        extractor: DetailExtractor,
        store: RecordStore,
        max_pages: int = DEFAULT_MAX_PAGES,
        stats: CrawlStats | None = None,
    ) -> None:
        if max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {max_pages}")
        self.listing_crawler = listing_crawler
        self.extractor = extractor
        self.store = store
        self.max_pages = max_pages
        self.stats = stats or CrawlStats()

    async def walk(self, first_url: str) -> int:
        """Walk the pagination chain starting at first_url.

        Args:
            first_url: URL of the listing root.

        Returns:
            Number of Records stored during this walk.
        """
        stored = 0
        visited: set[str] = set()
        current: str | None = first_url

        while current is not None:
            if current in visited:
                logger.warning(f"Pagination cycle at {current} (from {first_url}), stopping")
                self.stats.truncated_listings += 1
                break
            if len(visited) >= self.max_pages:
                logger.warning(
                    f"Reached {self.max_pages} pages from {first_url}, not following {current}"
                )
                self.stats.truncated_listings += 1
                break
            visited.add(current)

            try:
                listing = await self.listing_crawler.list_entities(current)
            except ListingFetchError as e:
                logger.warning(f"Stopping listing {first_url} at {current}: {e}")
                self.stats.listing_failures += 1
                break
            self.stats.listing_pages += 1

            for entity_url in listing.entity_urls:
                self.stats.entities_seen += 1
                try:
                    record = await self.extractor.extract_record(entity_url)
                except ExtractionError as e:
                    logger.warning(f"Skipping supplier {entity_url}: {e}")
                    self.stats.entities_skipped += 1
                    continue
                if record.name in self.store:
                    self.stats.records_replaced += 1
                self.store.upsert(record.name, record)
                self.stats.records_stored += 1
                stored += 1

            logger.info(f"Supplier details have been fetched for {current}")
            current = listing.next_url

        return stored
