"""In-memory record store keyed by supplier name."""

import logging

from supplier_scraper.models import Record

logger = logging.getLogger(__name__)


class RecordStore:
    """Collects Records by name; a later upsert replaces the earlier Record.

    Records are kept unordered and sorted once by ``all()``. Not safe for
    concurrent writers.
    """

    def __init__(self) -> None:
        self._records: dict[str, Record] = {}

    def upsert(self, name: str, record: Record) -> None:
        """Store a Record under name, replacing any existing entry."""
        if name in self._records:
            logger.debug(f"Replacing existing record for {name!r}")
        self._records[name] = record

    def get(self, name: str) -> Record | None:
        return self._records.get(name)

    def all(self) -> list[Record]:
        """Return all Records sorted ascending by name."""
        return [self._records[name] for name in sorted(self._records)]

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records
