"""
RowPivoter: fan one block out into long-format rows.

For every tag in the block's header row, the column of minute values
beneath it is zipped with the shared time axis, producing one
``OutputRow`` per (tag, minute), tag-major and time-minor.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from dto.grid import SheetGrid
from dto.scada import Block, OutputRow, StationMetadata
from pivot.block_locator import find_tags
from pivot.column_extractor import read_column
from pivot.constants import DUMMY_MARKER, MISSING_VALUE

logger = logging.getLogger(__name__)


def pivot_block(
    grid: SheetGrid,
    block: Block,
    zone: str,
    station: StationMetadata,
    time_slots: Sequence[str],
    *,
    dummy_marker: str = DUMMY_MARKER,
    missing_value: str = MISSING_VALUE,
) -> List[OutputRow]:
    """
    Return the rows for *block*, or ``[]`` when its header row has no tags.

    Values are passed through as read; index 0 of every column lines up
    with ``time_slots[0]`` whichever block it came from.
    """
    tags = find_tags(grid, block.header_row, dummy_marker=dummy_marker)
    if not tags:
        return []

    range_label = block.range_label
    rows: List[OutputRow] = []
    for tag in tags:
        values = read_column(
            grid,
            tag.column,
            block.data_start_row,
            len(time_slots),
            missing=missing_value,
        )
        rows.extend(
            OutputRow(
                zone,
                station.name,
                station.date,
                slot,
                tag.label,
                value,
                range_label,
            )
            for slot, value in zip(time_slots, values)
        )

    logger.debug(
        "Block %s: %d tag(s) -> %d row(s)", range_label, len(tags), len(rows)
    )
    return rows
