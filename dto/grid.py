"""
SheetGrid: the cell grid every pivot step reads from.

A sparse ``(row, col) -> value`` lookup for the first worksheet of a
source file, together with the declared (occupied) range.  Rows and
columns are 0-based; absent cells are simply missing from ``cells``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel


class SheetGrid(BaseModel):
    """Read-only view of a worksheet's values."""

    # Fast (row, col) -> raw value lookup, only for present cells
    cells: Dict[Tuple[int, int], Any] = {}

    # Declared range, inclusive and 0-based
    min_row: int = 0
    min_col: int = 0
    max_row: int = 0
    max_col: int = 0

    source: Optional[str] = None

    model_config = {"arbitrary_types_allowed": True}

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------

    def has_cell(self, row: int, col: int) -> bool:
        return (row, col) in self.cells

    def cell_at(self, row: int, col: int, default: Any = None) -> Any:
        return self.cells.get((row, col), default)

    @classmethod
    def from_cells(
        cls,
        cells: Dict[Tuple[int, int], Any],
        source: Optional[str] = None,
    ) -> "SheetGrid":
        """Build a grid whose declared range is the bounding box of *cells*."""
        if not cells:
            return cls(cells={}, source=source)
        rows = [r for r, _ in cells]
        cols = [c for _, c in cells]
        return cls(
            cells=dict(cells),
            min_row=min(rows),
            min_col=min(cols),
            max_row=max(rows),
            max_col=max(cols),
            source=source,
        )
