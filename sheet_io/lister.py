from __future__ import annotations

import logging
import os
from typing import List

from pivot.constants import SOURCE_EXTENSIONS
from pivot.errors import DirectoryUnavailableError

logger = logging.getLogger(__name__)


def list_source_files(folder: str, sort: bool = False) -> List[str]:
    """
    Return the spreadsheet file names in *folder*.

    Without *sort* the order is whatever the filesystem returns, so batch
    membership can differ between machines.
    """
    try:
        names = os.listdir(folder)
    except OSError as exc:
        raise DirectoryUnavailableError(folder, str(exc)) from exc

    files = [n for n in names if os.path.splitext(n)[1] in SOURCE_EXTENSIONS]
    if sort:
        files.sort()
    logger.debug("Found %d source file(s) in %s", len(files), folder)
    return files
