"""XLSX writer for the supplier spreadsheet export."""

import logging
from pathlib import Path

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError

from supplier_scraper.models import Record

logger = logging.getLogger(__name__)

SHEET_TITLE = "Supplier information"

# Header order is fixed; Record fields map onto these columns in order
COLUMN_HEADERS = [
    "Company Name",
    "Contact Name",
    "Contact Number",
    "Contact Email",
    "Supplier Description",
]

# Column width bounds in characters
MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 100


class ExportError(Exception):
    """Raised when the spreadsheet cannot be written."""


def output_filename(directory_name: str) -> str:
    """File name for a directory's export, e.g. ``G-Cloud-Suppliers-List.xlsx``."""
    return f"{directory_name}-Suppliers-List.xlsx"


def _format_value(value: str | None) -> str | None:
    """Drop control characters that worksheets cannot hold."""
    if value is None:
        return None
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def record_to_row(record: Record) -> list[str | None]:
    """Convert a Record to a row in column order. Absent fields stay None."""
    values = [
        record.name,
        record.contact_name,
        record.contact_telephone,
        record.contact_email,
        record.description,
    ]
    return [_format_value(value) for value in values]


def _column_widths(rows: list[list[str | None]]) -> list[int]:
    """Width per column fitted to the longest value, within bounds."""
    widths = [len(header) for header in COLUMN_HEADERS]
    for row in rows:
        for i, value in enumerate(row):
            if value:
                widths[i] = max(widths[i], len(value))
    return [min(max(width + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH) for width in widths]


def build_workbook(records: list[Record]) -> Workbook:
    """Build a workbook with a bold header row and one row per Record."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE

    header_font = Font(bold=True)
    for col, header in enumerate(COLUMN_HEADERS, 1):
        cell = sheet.cell(row=1, column=col, value=header)
        cell.font = header_font

    rows = [record_to_row(record) for record in records]
    for row_idx, row in enumerate(rows, 2):
        for col, value in enumerate(row, 1):
            # None leaves the cell blank
            sheet.cell(row=row_idx, column=col, value=value)

    for col, width in enumerate(_column_widths(rows), 1):
        sheet.column_dimensions[get_column_letter(col)].width = width

    return workbook


def write_records_xlsx(records: list[Record], path: Path) -> None:
    """Write Records to an XLSX file, creating parent directories.

    Raises:
        ExportError: If the directory or file cannot be written.
    """
    try:
        workbook = build_workbook(records)
    except IllegalCharacterError as e:
        raise ExportError(f"Cannot build spreadsheet for {path}: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
    except OSError as e:
        raise ExportError(f"Failed to write {path}: {e}") from e
    logger.info(f"Wrote {len(records)} records to {path}")
