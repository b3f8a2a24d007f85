from __future__ import annotations

from typing import Any, List

from dto.grid import SheetGrid
from pivot.constants import MISSING_VALUE


def read_column(
    grid: SheetGrid,
    column: int,
    start_row: int,
    count: int,
    missing: Any = MISSING_VALUE,
) -> List[Any]:
    """Read *count* values down *column*; absent cells become *missing*."""
    return [
        grid.cell_at(row, column, missing)
        for row in range(start_row, start_row + count)
    ]
