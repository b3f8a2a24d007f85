"""
Grid reading: loads the first worksheet of a source file into a
``SheetGrid``.

``.xlsx`` files go through openpyxl with ``data_only=True`` so formula
cells yield Excel's cached values; legacy ``.xls`` files go through xlrd.
Empty cells are left out of the grid; date-formatted cells become
``datetime`` values in both cases.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, Tuple

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd.compdoc import CompDocError
from xlrd.xldate import XLDateError, xldate_as_datetime

from dto.grid import SheetGrid
from pivot.errors import UnreadableSourceError

logger = logging.getLogger(__name__)

_OPENPYXL_ERRORS = (
    InvalidFileException,
    zipfile.BadZipFile,
    KeyError,
    ValueError,
    OSError,
)

_XLRD_ERRORS = (
    xlrd.XLRDError,
    CompDocError,
    ValueError,
    OSError,
)


def read_grid(path: str) -> SheetGrid:
    """Read the first worksheet of *path*; raises ``UnreadableSourceError``."""
    suffix = Path(path).suffix.lower()
    if suffix == ".xls":
        return _read_xls(path)
    if suffix == ".xlsx":
        return _read_xlsx(path)
    raise UnreadableSourceError(path, f"unsupported file type '{suffix}'")


# ------------------------------------------------------------------
# .xlsx  (openpyxl)
# ------------------------------------------------------------------

def _read_xlsx(path: str) -> SheetGrid:
    try:
        wb = openpyxl.load_workbook(path, data_only=True)
    except _OPENPYXL_ERRORS as exc:
        raise UnreadableSourceError(path, str(exc)) from exc

    try:
        ws = wb.worksheets[0]
        cells: Dict[Tuple[int, int], Any] = {}
        # openpyxl is 1-based; the grid is 0-based
        for r, row in enumerate(
            ws.iter_rows(min_row=1, min_col=1, values_only=True)
        ):
            for c, value in enumerate(row):
                if value is not None:
                    cells[(r, c)] = value

        grid = SheetGrid(
            cells=cells,
            min_row=ws.min_row - 1,
            min_col=ws.min_column - 1,
            max_row=ws.max_row - 1,
            max_col=ws.max_column - 1,
            source=path,
        )
    finally:
        wb.close()

    logger.debug(
        "Read %s: %d cell(s), range (%d,%d)-(%d,%d)",
        path, len(cells), grid.min_row, grid.min_col, grid.max_row, grid.max_col,
    )
    return grid


# ------------------------------------------------------------------
# .xls  (xlrd)
# ------------------------------------------------------------------

def _xls_value(cell: xlrd.sheet.Cell, datemode: int) -> Any:
    if cell.ctype == xlrd.XL_CELL_DATE:
        try:
            return xldate_as_datetime(cell.value, datemode)
        except XLDateError:
            return cell.value
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value, cell.value)
    return cell.value


def _read_xls(path: str) -> SheetGrid:
    try:
        book = xlrd.open_workbook(path, on_demand=True)
    except _XLRD_ERRORS as exc:
        raise UnreadableSourceError(path, str(exc)) from exc

    try:
        sheet = book.sheet_by_index(0)
        cells: Dict[Tuple[int, int], Any] = {}
        for r in range(sheet.nrows):
            for c, cell in enumerate(sheet.row(r)):
                if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
                    continue
                cells[(r, c)] = _xls_value(cell, book.datemode)

        grid = SheetGrid(
            cells=cells,
            min_row=0,
            min_col=0,
            max_row=max(sheet.nrows - 1, 0),
            max_col=max(sheet.ncols - 1, 0),
            source=path,
        )
    except _XLRD_ERRORS as exc:
        raise UnreadableSourceError(path, str(exc)) from exc
    finally:
        book.release_resources()

    logger.debug("Read %s: %d cell(s)", path, len(cells))
    return grid
