"""Extraction sub-package: slugs, titles and excerpts from draft HTML."""

from .metadata import DraftMetadata, extract_metadata
from .slugs import humanize_slug, slugify, unique_slug
from .text import clean_whitespace, collation_key, shorten_excerpt

__all__ = [
    "DraftMetadata",
    "extract_metadata",
    "clean_whitespace",
    "collation_key",
    "humanize_slug",
    "shorten_excerpt",
    "slugify",
    "unique_slug",
]
