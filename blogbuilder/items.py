"""Data model for a build: drafts read from disk and the posts published from them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


# ---------------------------------------------------------------------------
# Input side
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Draft:
    """A candidate source document in the drafts directory."""

    path: Path
    extension: str = ".html"

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def base_name(self) -> str:
        """File name without the document extension (matched case-insensitively)."""
        return re.sub(re.escape(self.extension) + r"$", "", self.name, flags=re.IGNORECASE)


# ---------------------------------------------------------------------------
# Output side
# ---------------------------------------------------------------------------

class Post(BaseModel):
    """One manifest entry.  Field order is the serialized key order."""

    slug: str = Field(pattern=_SLUG_PATTERN)
    title: str = Field(min_length=1)
    excerpt: str = ""
    href: str

    @field_validator("title", "excerpt", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


@dataclass(frozen=True)
class Publication:
    """A Post paired with the raw bytes that get published under its slug."""

    post: Post
    content: bytes
    source: Path
    filename: str
