"""Exception hierarchy.  Every failure that aborts a build is a BuildError."""

from __future__ import annotations

from pathlib import Path


class BuildError(RuntimeError):
    """Raised when a build cannot complete.

    Attributes:
        path -- the file or directory involved (None when not applicable)
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class DraftScanError(BuildError):
    """The drafts directory could not be listed or a draft could not be read."""


class MarkerError(BuildError):
    """The index document's listing markers are missing or out of order."""


class PublishError(BuildError):
    """An output file or directory could not be written."""
