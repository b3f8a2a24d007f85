"""
Exceptions raised by the consolidation pipeline.

Missing cells and unparseable dates are not errors: they resolve to the
``N/A`` sentinel or pass through verbatim.
"""


class ScadaPivotError(Exception):
    """Base class for pipeline failures."""


class UnreadableSourceError(ScadaPivotError):
    """A source file could not be opened or parsed as a spreadsheet."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Cannot read spreadsheet '{path}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DirectoryUnavailableError(ScadaPivotError):
    """A zone's input folder could not be listed."""

    def __init__(self, folder: str, reason: str = ""):
        self.folder = folder
        self.reason = reason
        msg = f"Cannot list folder '{folder}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
