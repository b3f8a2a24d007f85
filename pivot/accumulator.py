"""
The batch-wide row sequence that every file of a batch appends into.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from pivot.constants import OUTPUT_HEADER

SEPARATOR_ROW: tuple = ()


class BatchAccumulator:
    """
    Ordered output rows for one batch, seeded with the fixed header row.

    Separator rows are appended into the same continuous sequence as data
    rows; nothing is reset between the files of a batch.
    """

    def __init__(self, header: Sequence[str] = OUTPUT_HEADER) -> None:
        self.header: List[str] = list(header)
        self.rows: List[Sequence[Any]] = []

    def __len__(self) -> int:
        return len(self.rows)

    def extend(self, rows: Iterable[Sequence[Any]]) -> int:
        before = len(self.rows)
        self.rows.extend(rows)
        return len(self.rows) - before

    def add_separator(self, count: int) -> None:
        self.rows.extend(SEPARATOR_ROW for _ in range(count))
