"""
FileProcessor: pivot every block of one source grid into the batch.

Block offsets are visited in ascending order.  The first block is always
pivoted and appended without a separator; each later block that yields
rows is preceded by a run of empty separator rows.  Blocks without tags
add nothing.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from numbers import Number
from typing import Any, List, Optional

from openpyxl.utils.datetime import from_excel

from dto.grid import SheetGrid
from dto.output import FileResult
from dto.schema import SheetSchema
from dto.scada import StationMetadata
from pivot.accumulator import BatchAccumulator
from pivot.constants import DEFAULT_SCHEMA
from pivot.row_pivoter import pivot_block
from pivot.time_grid import generate_time_slots

logger = logging.getLogger(__name__)

_DATE_FORMAT = "%Y-%m-%d"


def format_station_date(value: Any) -> Any:
    """
    Render the date cell as ``yyyy-mm-dd`` when it is a date serial.

    Non-numeric values (including the ``N/A`` sentinel) are returned
    unchanged, as is any number that does not map to a calendar date.
    """
    if isinstance(value, date):
        return value.strftime(_DATE_FORMAT)
    if isinstance(value, bool) or not isinstance(value, Number):
        return value
    try:
        converted = from_excel(value)
    except (OverflowError, ValueError, TypeError):
        logger.warning("Date cell %r is not a usable date serial; keeping it", value)
        return value
    if not isinstance(converted, datetime):
        # fractions of a day come back as a bare time
        return value
    return converted.strftime(_DATE_FORMAT)


def read_station_metadata(
    grid: SheetGrid,
    schema: SheetSchema = DEFAULT_SCHEMA,
) -> StationMetadata:
    name = grid.cell_at(*schema.name_cell, schema.missing_value)
    raw_date = grid.cell_at(*schema.date_cell, schema.missing_value)
    return StationMetadata(name=name, date=format_station_date(raw_date))


class FileProcessor:
    """
    Appends the pivoted rows of one grid at a time to a batch accumulator.

    Usage::

        processor = FileProcessor()
        processor.process(grid, "BGK", accumulator)
    """

    def __init__(self, schema: SheetSchema = DEFAULT_SCHEMA) -> None:
        self.schema = schema
        self._blocks = schema.blocks()
        self._time_slots: List[str] = generate_time_slots(schema.data_row_count)

    def process(
        self,
        grid: SheetGrid,
        zone: str,
        accumulator: BatchAccumulator,
        file_name: Optional[str] = None,
    ) -> FileResult:
        station = read_station_metadata(grid, self.schema)
        result = FileResult(
            file_name=file_name or grid.source or "",
            station_name=str(station.name),
            date=str(station.date),
        )

        for index, block in enumerate(self._blocks):
            rows = pivot_block(
                grid,
                block,
                zone,
                station,
                self._time_slots,
                dummy_marker=self.schema.dummy_marker,
                missing_value=self.schema.missing_value,
            )
            if not rows:
                continue

            if index > 0:
                accumulator.add_separator(self.schema.separator_row_count)
                result.separator_rows_added += self.schema.separator_row_count

            result.rows_added += accumulator.extend(rows)
            result.blocks_present.append(block.range_label)

        logger.info(
            "  %s: station=%s date=%s blocks=%s rows=%d",
            result.file_name,
            result.station_name,
            result.date,
            result.blocks_present,
            result.rows_added,
        )
        return result
