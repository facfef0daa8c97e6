"""Index patcher: regenerate the marker-delimited listing inside the homepage.

Only the text between the start and end markers is owned by this module.
Everything before the start marker and after the end marker is copied
through byte-for-byte.
"""

from __future__ import annotations

import html as html_lib
import logging
from pathlib import Path

from blogbuilder.errors import BuildError, MarkerError, PublishError
from blogbuilder.items import Post
from blogbuilder.settings import (
    EMPTY_LISTING_MESSAGE,
    END_MARKER,
    READ_MORE_LABEL,
    START_MARKER,
)

logger = logging.getLogger(__name__)

# Round-trips any byte sequence through str
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for element text and attribute values."""
    return html_lib.escape(text, quote=True)


# ---------------------------------------------------------------------------
# Listing markup
# ---------------------------------------------------------------------------

def render_listing(posts: list[Post], indent: str = "", newline: str = "\n") -> str:
    """Render the listing block, one card per post, every line prefixed by *indent*."""
    lines: list[str] = [f'{indent}<div class="grid md:grid-cols-3 gap-10">']

    if not posts:
        lines.append(f'{indent}  <p class="text-gray-400">{escape_html(EMPTY_LISTING_MESSAGE)}</p>')
    else:
        for i, post in enumerate(posts):
            if i:
                lines.append("")
            lines.append(
                f'{indent}  <article class="card shadow-lg overflow-hidden p-6 transition '
                f'duration-300 transform hover:shadow-xl hover:-translate-y-1">',
            )
            lines.append(f'{indent}    <h3 class="text-xl font-semibold mb-3">{escape_html(post.title)}</h3>')
            lines.append(f'{indent}    <p class="mb-4">{escape_html(post.excerpt)}</p>')
            lines.append(
                f'{indent}    <a href="{escape_html(post.href)}" class="font-medium">{READ_MORE_LABEL}</a>',
            )
            lines.append(f"{indent}  </article>")

    lines.append(f"{indent}</div>")
    return newline.join(lines)


# ---------------------------------------------------------------------------
# Marker handling
# ---------------------------------------------------------------------------

def find_markers(
    text: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> tuple[int, int]:
    """Return the offsets of the start and end markers.

    Raises:
        MarkerError: if either marker is missing or the end marker comes first.
    """
    start = text.find(start_marker)
    end = text.find(end_marker)
    if start == -1:
        raise MarkerError(f"Start marker {start_marker!r} not found in index document")
    if end == -1:
        raise MarkerError(f"End marker {end_marker!r} not found in index document")
    if end < start:
        raise MarkerError(
            f"End marker {end_marker!r} precedes start marker {start_marker!r} in index document",
        )
    return start, end


def marker_indent(text: str, start: int) -> str:
    """Indentation of the line holding the marker at *start*.

    Only the leading whitespace counts; any markup sharing the line with
    the marker is not repeated.
    """
    line_start = text.rfind("\n", 0, start) + 1
    prefix = text[line_start:start]
    return prefix[: len(prefix) - len(prefix.lstrip())]


def patch_index(
    text: str,
    posts: list[Post],
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> str:
    """Return *text* with the marker region replaced by the listing for *posts*."""
    start, end = find_markers(text, start_marker, end_marker)
    indent = marker_indent(text, start)
    newline = "\r\n" if "\r\n" in text else "\n"

    before = text[: start + len(start_marker)]
    after = text[end + len(end_marker):]
    listing = render_listing(posts, indent, newline)
    return f"{before}{newline}{listing}{newline}{indent}{end_marker}{after}"


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

def read_index(path: Path) -> str:
    """Read the index document without newline translation or decode errors.

    Raises:
        BuildError: if the file is missing or unreadable.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise BuildError(f"Cannot read index document {path}: {exc.strerror or exc}", path=path) from exc
    return data.decode(_ENCODING, _ERRORS)


def write_index(path: Path, text: str) -> None:
    """Write *text* back with the same byte encoding :func:`read_index` used."""
    try:
        path.write_bytes(text.encode(_ENCODING, _ERRORS))
    except OSError as exc:
        raise PublishError(f"Cannot write index document {path}: {exc.strerror or exc}", path=path) from exc
    logger.info("Patched listing in %s", path)
