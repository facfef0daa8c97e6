"""Slug generation for published drafts."""

from __future__ import annotations

import re
import unicodedata

from blogbuilder.settings import SLUG_PLACEHOLDER

# Characters allowed in slugs
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_LEADING_TRAILING_DASH_RE = re.compile(r"^-+|-+$")
_WORD_RE = re.compile(r"\w+")


def slugify(name: str) -> str:
    """Convert a draft's base file name into a URL-safe slug.

    Example:
        "Café Reviews (2024)" → "cafe-reviews-2024"

    Names that normalize to nothing get the ``post`` placeholder; collision
    suffixes are applied on top of it like any other slug.
    """
    normalized = unicodedata.normalize("NFKD", name)
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = _NON_SLUG_RE.sub("-", normalized.lower())
    slug = _LEADING_TRAILING_DASH_RE.sub("", slug)
    return slug or SLUG_PLACEHOLDER


def unique_slug(slug: str, seen: dict[str, int]) -> str:
    """Return *slug*, or *slug* with ``-1``, ``-2``, … if already taken.

    *seen* maps each base slug to the next suffix to try and also records
    every slug handed out, so a draft literally named ``launch-1`` cannot
    clash with the suffix given to a second ``launch``.
    """
    if slug not in seen:
        seen[slug] = 1
        return slug

    counter = seen[slug]
    candidate = f"{slug}-{counter}"
    while candidate in seen:
        counter += 1
        candidate = f"{slug}-{counter}"
    seen[slug] = counter + 1
    seen[candidate] = 1
    return candidate


def humanize_slug(slug: str) -> str:
    """Turn ``my-first-post`` into ``My First Post``."""
    return _WORD_RE.sub(
        lambda m: m.group(0)[0].upper() + m.group(0)[1:],
        slug.replace("-", " "),
    )
