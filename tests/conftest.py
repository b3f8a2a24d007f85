"""
Shared fixtures: builders for in-memory SCADA grids.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

import pytest

from dto.grid import SheetGrid

DAY = 1440


def add_block(
    cells: Dict[Tuple[int, int], Any],
    offset: int,
    tags: Iterable[str],
    first_col: int = 2,
    rows: int = DAY,
    value=lambda tag_index, minute: tag_index * 10_000 + minute,
) -> None:
    """Put a header row at offset+2 and *rows* values per tag from offset+5."""
    for i, label in enumerate(tags):
        col = first_col + i
        cells[(offset + 2, col)] = label
        for minute in range(rows):
            cells[(offset + 5 + minute, col)] = value(i, minute)


def make_grid(
    blocks: Optional[Dict[int, Iterable[str]]] = None,
    name: Any = "Station Alpha",
    date: Any = 36526,
    source: str = "station.xlsx",
) -> SheetGrid:
    cells: Dict[Tuple[int, int], Any] = {}
    if name is not None:
        cells[(0, 0)] = name
    if date is not None:
        cells[(5, 1)] = date
    for offset, tags in (blocks or {}).items():
        add_block(cells, offset, tags)
    return SheetGrid.from_cells(cells, source=source)


@pytest.fixture
def grid_factory():
    return make_grid
