"""Base scraper class for supplier directories."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from supplier_scraper.discovery import discover_listing_urls
from supplier_scraper.extractor import DetailExtractor
from supplier_scraper.fetcher import DEFAULT_TIMEOUT, PageFetcher
from supplier_scraper.listing import ListingCrawler
from supplier_scraper.models import Selectors
from supplier_scraper.store import RecordStore
from supplier_scraper.walker import DEFAULT_MAX_PAGES, CrawlStats, PaginationWalker
from supplier_scraper.xlsx_writer import output_filename, write_records_xlsx

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when scraper settings are invalid."""


def _env_number(name: str, default: float, cast: type) -> float:
    """Read a numeric setting from the environment, falling back to default."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


class DirectoryScraper(ABC):
    """Abstract base class for A-Z supplier directory scrapers.

    Subclasses set ``directory_name``, ``base_url`` and ``selectors`` as class
    attributes; a subclass missing any of them cannot be instantiated.
    """

    @property
    @abstractmethod
    def directory_name(self) -> str:
        """Name used in the export file name, e.g. "G-Cloud"."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Root page holding the A-Z navigation and the first listing."""

    @property
    @abstractmethod
    def selectors(self) -> Selectors:
        """CSS selectors for this directory's page layout."""

    def __init__(
        self,
        output_dir: Path | None = None,
        timeout: float | None = None,
        max_pages: int | None = None,
    ) -> None:
        """Initialize from arguments, falling back to SCRAPER_* environment variables.

        Raises:
            ConfigError: If a setting is not a number or is out of range.
        """
        if output_dir is None:
            output_dir = Path(os.environ.get("SCRAPER_OUTPUT_DIR", "output"))
        if timeout is None:
            timeout = _env_number("SCRAPER_TIMEOUT", DEFAULT_TIMEOUT, float)
        if max_pages is None:
            max_pages = int(_env_number("SCRAPER_MAX_PAGES", DEFAULT_MAX_PAGES, int))

        if timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {timeout}")
        if max_pages < 1:
            raise ConfigError(f"Max pages must be at least 1, got {max_pages}")

        self.output_dir = output_dir
        self.timeout = timeout
        self.max_pages = max_pages
        self.stats = CrawlStats()

    @property
    def output_path(self) -> Path:
        return self.output_dir / output_filename(self.directory_name)

    async def crawl(self, fetcher: PageFetcher) -> RecordStore:
        """Crawl the root listing and every listing linked from the navigation.

        Args:
            fetcher: Open PageFetcher to fetch every page through.

        Returns:
            RecordStore holding one Record per supplier name.

        Raises:
            FetchError: If the root page cannot be fetched.
            DiscoveryError: If the root page has no navigation.
        """
        self.stats = CrawlStats()
        store = RecordStore()

        logger.info(f"Fetching navigation URLs from {self.base_url}")
        root = await fetcher.fetch(self.base_url)
        listing_urls = discover_listing_urls(root, self.selectors)
        logger.info("Navigation URLs have been collected.")

        walker = PaginationWalker(
            ListingCrawler(fetcher, self.selectors),
            DetailExtractor(fetcher, self.selectors),
            store,
            max_pages=self.max_pages,
            stats=self.stats,
        )
        for url in [root.url, *listing_urls]:
            stored = await walker.walk(url)
            logger.info(f"Stored {stored} records from listing {url}")

        logger.info(f"All supplier details have been fetched: {self.stats.summary()}")
        return store

    async def run(self) -> tuple[Path, CrawlStats]:
        """Run the full crawl and write the spreadsheet.

        Returns:
            Tuple of (xlsx_path, stats).

        Raises:
            FetchError: If the root page cannot be fetched.
            DiscoveryError: If the root page has no navigation.
            ExportError: If the spreadsheet cannot be written.
        """
        logger.info(f"Starting crawl for {self.directory_name}")

        async with PageFetcher(timeout=self.timeout) as fetcher:
            store = await self.crawl(fetcher)

        path = self.output_path
        write_records_xlsx(store.all(), path)
        return path, self.stats
