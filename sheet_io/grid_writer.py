"""
Writes a consolidated table as a single-sheet .xlsx file.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from openpyxl import Workbook

from pivot.constants import OUTPUT_SHEET_NAME

logger = logging.getLogger(__name__)


def write_table(
    path: str,
    header_row: Sequence[str],
    rows: Iterable[Sequence[Any]],
    sheet_name: str = OUTPUT_SHEET_NAME,
) -> int:
    """
    Write *header_row* then *rows* to *path*, replacing any existing file.

    Empty rows are written as blank spreadsheet rows.  Returns the number
    of data rows written.
    """
    wb = Workbook(write_only=True)
    ws = wb.create_sheet(title=sheet_name)

    ws.append(list(header_row))
    count = 0
    for row in rows:
        ws.append(list(row))
        count += 1

    wb.save(path)
    logger.debug("Wrote %d row(s) to %s", count, path)
    return count
