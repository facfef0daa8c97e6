"""Title and excerpt extraction from draft HTML.

Priority chain (highest → lowest):
    title:   <title> → first <h1> → caller fallback (humanized slug)
    excerpt: <meta name="description"> → first <p> → ""

Extraction is best-effort.  lxml repairs malformed markup its own way and
the result is taken as-is.
"""

from __future__ import annotations

import html as html_lib
import logging
import re
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

from blogbuilder.extractors.text import clean_whitespace, shorten_excerpt, strip_tags
from blogbuilder.settings import EXCERPT_MAX_LENGTH

logger = logging.getLogger(__name__)

_DESCRIPTION_NAME_RE = re.compile(r"^\s*description\s*$", re.IGNORECASE)


class DraftMetadata(NamedTuple):
    title: str
    excerpt: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _safe_str(val: object, default: str = "") -> str:
    """Safely convert a BeautifulSoup attribute value (str | list | None) to str."""
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def _element_text(tag: Tag | None) -> str:
    """Inner markup of *tag* with nested tags stripped and references decoded."""
    if tag is None:
        return ""
    inner = strip_tags(tag.decode_contents())
    return clean_whitespace(html_lib.unescape(inner))


def _raw_text(tag: Tag | None) -> str:
    """Text of a raw-text element such as <title>, where lxml keeps tags as characters."""
    if tag is None:
        return ""
    return clean_whitespace(html_lib.unescape(strip_tags(tag.get_text())))


def _first_element(soup: BeautifulSoup, name: str) -> Tag | None:
    found = soup.find(name)
    return found if isinstance(found, Tag) else None


def _meta_description(soup: BeautifulSoup) -> str:
    meta = soup.find("meta", attrs={"name": _DESCRIPTION_NAME_RE})
    if not isinstance(meta, Tag):
        return ""
    content = strip_tags(_safe_str(meta.get("content")))
    return clean_whitespace(html_lib.unescape(content))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_title(soup: BeautifulSoup) -> str:
    """Return the <title> text, else the first <h1> text, else "".

    A <title> element that exists but is blank still wins over <h1>, so the
    caller falls back to its own title.
    """
    title_tag = _first_element(soup, "title")
    if title_tag is not None:
        return _raw_text(title_tag)
    return _element_text(_first_element(soup, "h1"))


def extract_excerpt_source(soup: BeautifulSoup) -> str:
    """Return the meta description, else the first <p> text, else ""."""
    description = _meta_description(soup)
    if description:
        return description
    return _element_text(_first_element(soup, "p"))


def extract_metadata(
    html: str,
    fallback_title: str = "",
    max_excerpt_length: int = EXCERPT_MAX_LENGTH,
) -> DraftMetadata:
    """Extract the listing title and excerpt from *html*.

    Args:
        html:               Raw draft markup.
        fallback_title:     Used when neither <title> nor <h1> yields text.
        max_excerpt_length: Excerpt cap in characters, ellipsis included.
    """
    soup = BeautifulSoup(html, "lxml")

    title = extract_title(soup)
    if not title:
        logger.debug("No <title> or <h1>; falling back to %r", fallback_title)
        title = clean_whitespace(fallback_title)

    excerpt = shorten_excerpt(extract_excerpt_source(soup), max_excerpt_length)
    return DraftMetadata(title=title, excerpt=excerpt)
