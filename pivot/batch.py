"""
Batching: groups a zone's source files into fixed-size batches and
writes one consolidated table per batch.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterator, List, Sequence

from dto.grid import SheetGrid
from dto.output import BatchResult
from pivot.accumulator import BatchAccumulator
from pivot.constants import (
    DEFAULT_BATCH_SIZE,
    OUTPUT_FILE_TEMPLATE,
    OUTPUT_HEADER,
)
from pivot.file_processor import FileProcessor

logger = logging.getLogger(__name__)

GridReader = Callable[[str], SheetGrid]
GridWriter = Callable[[str, Sequence[str], List[Sequence]], object]


def partition_batches(
    files: Sequence[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[List[str]]:
    """
    Split *files* into consecutive groups of *batch_size*, keeping order.

    The last group holds the remainder; no empty group is ever produced.
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return [
        list(files[i : i + batch_size])
        for i in range(0, len(files), batch_size)
    ]


def batch_output_path(output_folder: str, batch_number: int) -> str:
    return os.path.join(
        output_folder, OUTPUT_FILE_TEMPLATE.format(batch_number=batch_number)
    )


def iter_batches(
    input_folder: str,
    files: Sequence[str],
    zone: str,
    output_folder: str,
    *,
    reader: GridReader,
    writer: GridWriter,
    processor: FileProcessor | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Iterator[BatchResult]:
    """
    Process *files* batch by batch, in the order given, yielding each
    batch once its table has been written.

    A file that cannot be read aborts the run: its batch is not written
    and the remaining batches are not attempted.
    """
    processor = processor or FileProcessor()

    for batch_number, batch_files in enumerate(
        partition_batches(files, batch_size), start=1
    ):
        accumulator = BatchAccumulator(OUTPUT_HEADER)
        batch = BatchResult(
            batch_number=batch_number,
            output_path=batch_output_path(output_folder, batch_number),
        )

        for file_name in batch_files:
            grid = reader(os.path.join(input_folder, file_name))
            batch.files.append(
                processor.process(grid, zone, accumulator, file_name=file_name)
            )

        writer(batch.output_path, accumulator.header, accumulator.rows)
        batch.row_count = len(accumulator)

        logger.info(
            "Batch %d: Consolidated SCADA Tag data for zone %s has been "
            "successfully written to %s",
            batch_number,
            zone,
            batch.output_path,
        )
        yield batch


def run_batches(
    input_folder: str,
    files: Sequence[str],
    zone: str,
    output_folder: str,
    *,
    reader: GridReader,
    writer: GridWriter,
    processor: FileProcessor | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[BatchResult]:
    """Run every batch and return the results; see ``iter_batches``."""
    return list(
        iter_batches(
            input_folder,
            files,
            zone,
            output_folder,
            reader=reader,
            writer=writer,
            processor=processor,
            batch_size=batch_size,
        )
    )
