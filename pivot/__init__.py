"""
Block extraction and pivot of fixed-layout SCADA exports.

Pipeline, leaf first:
  1. generate_time_slots : the shared per-minute time axis
  2. find_tags           : tag labels in a block's header row
  3. read_column         : a day of values under one tag
  4. pivot_block         : one long-format row per (tag, minute)
  5. FileProcessor       : every block of one file, with separators
  6. iter_batches        : fixed-size groups of files -> one table each
  7. run_zones           : independent, concurrently started zones
"""

from pivot.accumulator import BatchAccumulator
from pivot.batch import iter_batches, partition_batches, run_batches
from pivot.block_locator import find_tags
from pivot.column_extractor import read_column
from pivot.errors import (
    DirectoryUnavailableError,
    ScadaPivotError,
    UnreadableSourceError,
)
from pivot.file_processor import FileProcessor, format_station_date, read_station_metadata
from pivot.row_pivoter import pivot_block
from pivot.time_grid import generate_time_slots
from pivot.zones import derive_zone, run_zone, run_zones

__all__ = [
    "BatchAccumulator",
    "DirectoryUnavailableError",
    "FileProcessor",
    "ScadaPivotError",
    "UnreadableSourceError",
    "derive_zone",
    "find_tags",
    "format_station_date",
    "generate_time_slots",
    "iter_batches",
    "partition_batches",
    "pivot_block",
    "read_column",
    "read_station_metadata",
    "run_batches",
    "run_zone",
    "run_zones",
]
