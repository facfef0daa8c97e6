"""Draft discovery: list candidate documents in the drafts directory."""

from __future__ import annotations

import logging
from pathlib import Path

from blogbuilder.errors import DraftScanError
from blogbuilder.items import Draft
from blogbuilder.settings import DRAFT_EXTENSION

logger = logging.getLogger(__name__)


def scan_drafts(drafts_dir: Path, extension: str = DRAFT_EXTENSION) -> list[Draft]:
    """Return the drafts in *drafts_dir*, sorted by file name.

    Only regular files whose name ends in *extension* (any case) count;
    subdirectories and other files are skipped.  Sorting keeps collision
    suffixes stable from run to run.

    Raises:
        DraftScanError: if the directory cannot be listed.
    """
    suffix = extension.lower()
    try:
        entries = sorted(drafts_dir.iterdir(), key=lambda p: p.name)
        drafts = [
            Draft(path=entry, extension=extension)
            for entry in entries
            if entry.name.lower().endswith(suffix) and entry.is_file()
        ]
    except OSError as exc:
        raise DraftScanError(
            f"Cannot list drafts directory {drafts_dir}: {exc.strerror or exc}",
            path=drafts_dir,
        ) from exc

    logger.info("Found %d draft(s) in %s", len(drafts), drafts_dir)
    return drafts


def read_draft(draft: Draft) -> bytes:
    """Return the raw bytes of *draft*.

    Raises:
        DraftScanError: if the file cannot be read.
    """
    try:
        return draft.path.read_bytes()
    except OSError as exc:
        raise DraftScanError(
            f"Cannot read draft {draft.path}: {exc.strerror or exc}",
            path=draft.path,
        ) from exc
