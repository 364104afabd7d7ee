"""Exception classes for sxmd.

The scanner itself never raises on malformed input; these cover the
boundary where documents are loaded.
"""

from __future__ import annotations


class SxmdError(Exception):
    """Base exception for all sxmd errors."""

    pass


class InputReadError(SxmdError):
    """The input document could not be read.

    Raised by the command line when the file is missing, unreadable,
    or otherwise fails to load.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        """Initialize with the offending path.

        Args:
            path: Path as given on the command line
            reason: Underlying OS error message (optional)
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read input file {path}")
