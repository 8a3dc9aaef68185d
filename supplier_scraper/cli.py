"""CLI for running the supplier directory scraper."""

import asyncio
import logging
import os
import sys
import time

from supplier_scraper.base import ConfigError
from supplier_scraper.directories.gcloud import GCloudScraper
from supplier_scraper.discovery import DiscoveryError
from supplier_scraper.fetcher import FetchError
from supplier_scraper.xlsx_writer import ExportError

logger = logging.getLogger(__name__)


def print_usage() -> None:
    """Print usage information."""
    print("Usage: python3 -m supplier_scraper.cli")
    print()
    print("Crawl the G-Cloud supplier directory and export it to a spreadsheet.")
    print("Takes no arguments; the output is written to")
    print("  output/G-Cloud-Suppliers-List.xlsx")
    print()
    print("Environment variables:")
    print("  SCRAPER_OUTPUT_DIR   Output directory (default: output)")
    print("  SCRAPER_TIMEOUT      Request timeout in seconds (default: 30)")
    print("  SCRAPER_MAX_PAGES    Max listing pages followed per letter (default: 500)")
    print("  SCRAPER_LOG_LEVEL    Logging level (default: INFO)")


def format_elapsed(seconds: float) -> str:
    """Format elapsed seconds as e.g. '12min 5s'."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}min {secs}s"


async def main() -> None:
    """Run the crawl-then-export pipeline and print a summary."""
    if len(sys.argv) > 1 and sys.argv[1] in ("-h", "--help", "help"):
        print_usage()
        return

    level = os.environ.get("SCRAPER_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"  ERROR: SCRAPER_LOG_LEVEL must be a logging level name, got {level!r}")
        sys.exit(1)
    logging.basicConfig(level=level)

    start = time.monotonic()
    try:
        scraper = GCloudScraper()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"  ERROR: {e}")
        sys.exit(1)

    print(f"\n=== Scraping {scraper.directory_name} suppliers ===")
    try:
        path, stats = await scraper.run()
    except (DiscoveryError, FetchError) as e:
        logger.error(f"Crawl failed: {e}")
        print(f"  ERROR: {e}")
        sys.exit(1)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        print(f"  ERROR: {e}")
        sys.exit(1)

    print(f"  Spreadsheet: {path}")

    print("\n=== Summary ===")
    print(f"Total: {stats.summary()}")
    print(f"Time to complete: {format_elapsed(time.monotonic() - start)}")


def cli() -> None:
    """Entry point for CLI."""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
