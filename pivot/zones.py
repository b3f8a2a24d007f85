"""
Zone coordination: one independent run per input folder.

Each zone lists its folder asynchronously, then processes all of its
batches synchronously.  Zones share no state; ``run_zones`` joins every
zone before returning so totals are only reported once all are done.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
from typing import Callable, List, Sequence

from dto.output import ZoneResult
from pivot.batch import GridReader, GridWriter, iter_batches
from pivot.constants import (
    DEFAULT_BATCH_SIZE,
    OUTPUT_SUBFOLDER,
    UNKNOWN_ZONE,
    ZONE_PATTERN,
)
from pivot.errors import DirectoryUnavailableError, ScadaPivotError
from pivot.file_processor import FileProcessor

logger = logging.getLogger(__name__)

_ZONE_RE = re.compile(ZONE_PATTERN, re.ASCII)

DirectoryLister = Callable[[str], List[str]]


def derive_zone(folder: str) -> str:
    """``./BGK_testing`` -> ``"BGK"``; ``"Unknown"`` if there is no prefix."""
    m = _ZONE_RE.match(os.path.basename(os.path.normpath(folder)))
    return m.group(1) if m else UNKNOWN_ZONE


async def run_zone(
    folder: str,
    *,
    lister: DirectoryLister,
    reader: GridReader,
    writer: GridWriter,
    processor: FileProcessor | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> ZoneResult:
    zone = derive_zone(folder)
    result = ZoneResult(zone=zone, folder=folder)

    output_folder = os.path.join(folder, OUTPUT_SUBFOLDER)
    try:
        files = await asyncio.to_thread(lister, folder)
        os.makedirs(output_folder, exist_ok=True)
    except (DirectoryUnavailableError, OSError) as exc:
        logger.error("Error reading the folder %s: %s", folder, exc)
        result.error = str(exc)
        return result

    logger.info("Zone %s: %d source file(s) in %s", zone, len(files), folder)

    # From here on the zone runs to completion without yielding.
    try:
        for batch in iter_batches(
            folder,
            files,
            zone,
            output_folder,
            reader=reader,
            writer=writer,
            processor=processor,
            batch_size=batch_size,
        ):
            result.batches.append(batch)
    except ScadaPivotError as exc:
        logger.error("Zone %s aborted: %s", zone, exc)
        result.error = str(exc)
    except Exception as exc:
        logger.exception("Zone %s failed unexpectedly", zone)
        result.error = f"{type(exc).__name__}: {exc}"

    return result


async def run_zones(
    folders: Sequence[str],
    *,
    lister: DirectoryLister,
    reader: GridReader,
    writer: GridWriter,
    processor_factory: Callable[[], FileProcessor] = FileProcessor,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[ZoneResult]:
    """Run every zone concurrently and wait for all of them."""
    tasks = [
        asyncio.create_task(
            run_zone(
                folder,
                lister=lister,
                reader=reader,
                writer=writer,
                processor=processor_factory(),
                batch_size=batch_size,
            ),
            name=f"zone:{folder}",
        )
        for folder in folders
    ]
    return list(await asyncio.gather(*tasks))
