"""
DTOs for the pivot itself: tags found in a header row, the fixed-offset
blocks they live in, station metadata, and the long-format output row.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import BaseModel


class Tag(BaseModel):
    """A SCADA tag label discovered in a block's header row."""

    label: str
    column: int


class Block(BaseModel):
    """A fixed-offset region: one header row plus a day of minute data."""

    offset: int
    span: int = 2000
    header_row_offset: int = 2
    data_row_offset: int = 5

    @property
    def header_row(self) -> int:
        return self.offset + self.header_row_offset

    @property
    def data_start_row(self) -> int:
        return self.offset + self.data_row_offset

    @property
    def range_label(self) -> str:
        return f"{self.offset}-{self.offset + self.span}"


class StationMetadata(BaseModel):
    name: Any
    date: Any


class OutputRow(NamedTuple):
    """One long-format row of the consolidated table."""

    zone: str
    station_name: Any
    date: Any
    time_slot: str
    tag_label: str
    value: Any
    range_label: str
