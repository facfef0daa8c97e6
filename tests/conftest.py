"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import INDEX_TEMPLATE


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A site root with an empty drafts/ directory and a marked index.html."""
    (tmp_path / "drafts").mkdir()
    (tmp_path / "index.html").write_text(INDEX_TEMPLATE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def add_draft(site: Path):
    def _add(name: str, html: str) -> Path:
        path = site / "drafts" / name
        path.write_text(html, encoding="utf-8")
        return path

    return _add
