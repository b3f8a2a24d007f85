"""
Find the tag labels in a block's header row.
"""

from __future__ import annotations

import logging
from typing import List

from dto.grid import SheetGrid
from dto.scada import Tag
from pivot.constants import DUMMY_MARKER

logger = logging.getLogger(__name__)


def find_tags(
    grid: SheetGrid,
    header_row: int,
    dummy_marker: str = DUMMY_MARKER,
) -> List[Tag]:
    """
    Return the tags in *header_row*, ordered by column.

    Only textual cells count; labels containing *dummy_marker* anywhere are
    placeholders and are dropped.
    """
    tags: List[Tag] = []
    for col in range(grid.min_col, grid.max_col + 1):
        value = grid.cell_at(header_row, col)
        if isinstance(value, str) and dummy_marker not in value:
            tags.append(Tag(label=value, column=col))

    logger.debug(
        "Header row %d of %s: %d tag(s) %s",
        header_row,
        grid.source or "<grid>",
        len(tags),
        [t.label for t in tags],
    )
    return tags
