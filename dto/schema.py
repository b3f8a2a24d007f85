"""
SheetSchema: the fixed physical layout of a SCADA export.

All row/column positions are 0-based.  The layout is validated once when
the model is built, so the pivot code can reference it symbolically.
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, field_validator, model_validator

from dto.scada import Block


class SheetSchema(BaseModel):
    block_offsets: Tuple[int, ...]
    block_span: int
    header_row_offset: int
    data_row_offset: int
    data_row_count: int
    separator_row_count: int
    name_cell: Tuple[int, int]
    date_cell: Tuple[int, int]
    missing_value: str
    dummy_marker: str

    @field_validator("block_offsets")
    @classmethod
    def _offsets_ascending(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if not value:
            raise ValueError("at least one block offset is required")
        if value[0] < 0:
            raise ValueError("block offsets must be non-negative")
        if any(b <= a for a, b in zip(value, value[1:])):
            raise ValueError(f"block offsets must be strictly ascending: {value}")
        return value

    @field_validator("block_span", "data_row_count")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be positive")
        return value

    @field_validator("separator_row_count", "header_row_offset")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be non-negative")
        return value

    @model_validator(mode="after")
    def _rows_fit_in_block(self) -> "SheetSchema":
        if self.header_row_offset >= self.data_row_offset:
            raise ValueError("header row must come before the data rows")
        if self.data_row_offset + self.data_row_count > self.block_span:
            raise ValueError(
                f"{self.data_row_count} data rows starting at +{self.data_row_offset} "
                f"do not fit in a block of {self.block_span} rows"
            )
        if any(b - a < self.block_span for a, b in zip(self.block_offsets, self.block_offsets[1:])):
            raise ValueError("blocks overlap: offsets closer than the block span")
        return self

    def blocks(self) -> List[Block]:
        """Return the blocks in ascending offset order."""
        return [
            Block(
                offset=offset,
                span=self.block_span,
                header_row_offset=self.header_row_offset,
                data_row_offset=self.data_row_offset,
            )
            for offset in self.block_offsets
        ]
