"""
Result DTOs reported back up the pipeline.

    RunSummary
      └─ zones: List[ZoneResult]
           └─ batches: List[BatchResult]
                └─ files: List[FileResult]
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class FileResult(BaseModel):
    """What one source file contributed to its batch."""

    file_name: str
    station_name: Optional[str] = None
    date: Optional[str] = None
    blocks_present: List[str] = []
    rows_added: int = 0
    separator_rows_added: int = 0


class BatchResult(BaseModel):
    batch_number: int
    output_path: str
    files: List[FileResult] = []
    row_count: int = 0


class ZoneResult(BaseModel):
    """Outcome of one zone's run."""

    zone: str
    folder: str
    batches: List[BatchResult] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def file_count(self) -> int:
        return sum(len(b.files) for b in self.batches)


class RunSummary(BaseModel):
    zones: List[ZoneResult] = []
    duration_seconds: float = 0.0

    @property
    def file_count(self) -> int:
        return sum(z.file_count for z in self.zones)

    @property
    def failed_zones(self) -> List[ZoneResult]:
        return [z for z in self.zones if not z.ok]
