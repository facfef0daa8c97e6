"""Text normalization helpers shared by the extractors and the publisher."""

from __future__ import annotations

import re
import unicodedata

from blogbuilder.settings import ELLIPSIS, EXCERPT_MAX_LENGTH

_WHITESPACE_RE = re.compile(r"\s+")
_TAG_RE = re.compile(r"<[^>]+>")
_TRAILING_PARTIAL_WORD_RE = re.compile(r"\s+\S*$")

# Stripped from the end of a truncated excerpt before the ellipsis goes on
_TRAILING_JUNK = " \t\r\n\f\v,;:.-–—\"'‘’“”"


def clean_whitespace(text: str) -> str:
    """Collapse every whitespace run (including nbsp) to one space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_tags(text: str) -> str:
    return _TAG_RE.sub("", text)


def shorten_excerpt(text: str, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Truncate *text* to at most *max_length* characters, ellipsis included.

    Text that already fits is returned unchanged.  Otherwise the cut is moved
    back to the previous word boundary, trailing punctuation, whitespace and
    quotes are dropped, and a single ``…`` is appended.  A lone word longer
    than the cap has no boundary to fall back to and is cut hard.
    """
    if len(text) <= max_length:
        return text

    truncated = text[: max_length - 1]
    if not text[max_length - 1].isspace():
        truncated = _TRAILING_PARTIAL_WORD_RE.sub("", truncated)
    truncated = truncated.rstrip(_TRAILING_JUNK)
    return f"{truncated}{ELLIPSIS}"


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(title: str) -> tuple[str, str, str]:
    """Sort key approximating locale-aware collation.

    Compares base letters first (accents and case ignored), then case-folded
    text with accents, then case with lowercase ahead of uppercase.
    """
    folded = title.casefold()
    return (_fold_accents(folded), folded, title.swapcase())
