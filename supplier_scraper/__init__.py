"""Supplier directory scraper exporting contact details to a spreadsheet."""

from supplier_scraper.base import ConfigError, DirectoryScraper
from supplier_scraper.discovery import DiscoveryError, discover_listing_urls
from supplier_scraper.extractor import DetailExtractor, ExtractionError, parse_record
from supplier_scraper.fetcher import FetchError, Page, PageFetcher
from supplier_scraper.listing import ListingCrawler, ListingFetchError, ListingPage, parse_listing
from supplier_scraper.models import Record, Selectors
from supplier_scraper.store import RecordStore
from supplier_scraper.walker import CrawlStats, PaginationWalker
from supplier_scraper.xlsx_writer import ExportError, write_records_xlsx

__all__ = [
    "ConfigError",
    "CrawlStats",
    "DetailExtractor",
    "DirectoryScraper",
    "DiscoveryError",
    "ExportError",
    "ExtractionError",
    "FetchError",
    "ListingCrawler",
    "ListingFetchError",
    "ListingPage",
    "Page",
    "PageFetcher",
    "PaginationWalker",
    "Record",
    "RecordStore",
    "Selectors",
    "discover_listing_urls",
    "parse_listing",
    "parse_record",
    "write_records_xlsx",
]
