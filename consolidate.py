"""
SCADA tag-log consolidator: CLI entry point.

Usage:
    python consolidate.py [<zone_folder> ...] [--batch-size N] [--sort] [-v]

Every zone folder (e.g. ``./BGK_testing``) holds fixed-layout .xls/.xlsx
SCADA exports.  Each file's tag blocks are pivoted into long-format rows
and every batch of files is written to
``<zone_folder>/output/Consolidated_SCADA_Tag_Data_Batch_<n>.xlsx``.

Without folder arguments the folders come from ``SCADA_INPUT_FOLDERS``
(comma separated), falling back to the three standard zone folders.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import logging
import os
import sys
import time
from typing import List, Optional

import dotenv
import psutil

from dto.output import RunSummary
from pivot.constants import (
    batch_size_from_env,
    input_folders_from_env,
    sort_files_from_env,
)
from pivot.file_processor import FileProcessor
from pivot.zones import run_zones
from sheet_io import list_source_files, read_grid, write_table

dotenv.load_dotenv()

logger = logging.getLogger(__name__)


def _log_level_from_env() -> int:
    """Numeric level for $LOG_LEVEL; raises ``ValueError`` for unknown names."""
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level '{name}'")
    return level


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def consolidate(
    folders: List[str],
    batch_size: int,
    sort_files: bool = False,
) -> RunSummary:
    """Run every zone folder to completion and return the summary."""
    lister = functools.partial(list_source_files, sort=sort_files)

    started = time.perf_counter()
    zones = asyncio.run(
        run_zones(
            folders,
            lister=lister,
            reader=read_grid,
            writer=write_table,
            processor_factory=FileProcessor,
            batch_size=batch_size,
        )
    )
    return RunSummary(zones=zones, duration_seconds=time.perf_counter() - started)


def _log_summary(summary: RunSummary) -> None:
    for zone in summary.zones:
        if zone.ok:
            logger.info(
                "Zone %s: %d file(s) in %d batch(es)",
                zone.zone,
                zone.file_count,
                len(zone.batches),
            )
        else:
            logger.error(
                "Zone %s (%s) failed after %d batch(es): %s",
                zone.zone,
                zone.folder,
                len(zone.batches),
                zone.error,
            )

    rss_mb = psutil.Process().memory_info().rss / 1024 / 1024
    load = ", ".join(f"{x:.2f}" for x in psutil.getloadavg())

    logger.info(
        "Processed %d files in %.3f seconds",
        summary.file_count,
        summary.duration_seconds,
    )
    logger.info("System Memory Usage: %.2f MB", rss_mb)
    logger.info("CPU Load: %s", load)


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Consolidate fixed-layout SCADA exports into long-format batches.",
    )
    parser.add_argument(
        "folders",
        nargs="*",
        help="Zone folders to process (default: $SCADA_INPUT_FOLDERS)",
    )
    parser.add_argument(
        "-b",
        "--batch-size",
        type=int,
        default=None,
        help="Source files per output file (default: $SCADA_BATCH_SIZE or 5)",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        default=None,
        help="Sort file names before batching for reproducible batch membership",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every header row and block at DEBUG level",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    else:
        try:
            level = _log_level_from_env()
        except ValueError as exc:
            parser.error(f"LOG_LEVEL: {exc}")
    _configure_logging(level)

    folders = args.folders or input_folders_from_env()
    if args.batch_size is not None:
        batch_size = args.batch_size
    else:
        try:
            batch_size = batch_size_from_env()
        except ValueError:
            parser.error("SCADA_BATCH_SIZE must be an integer")
    if batch_size <= 0:
        parser.error("--batch-size must be positive")
    sort_files = args.sort if args.sort is not None else sort_files_from_env()

    summary = consolidate(folders, batch_size, sort_files=sort_files)
    _log_summary(summary)

    return 1 if summary.failed_zones else 0


if __name__ == "__main__":
    sys.exit(main())
