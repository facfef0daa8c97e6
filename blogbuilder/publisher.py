"""Publisher: slug assignment, post assembly, manifest rendering and output writes.

Planning and writing are separate steps so a build can validate everything
(including the index markers) before the first byte hits the disk.
"""

from __future__ import annotations

import json
import logging
import posixpath
from pathlib import Path

from blogbuilder.errors import PublishError
from blogbuilder.extractors import (
    collation_key,
    extract_metadata,
    humanize_slug,
    slugify,
    unique_slug,
)
from blogbuilder.items import Draft, Post, Publication
from blogbuilder.scanner import read_draft
from blogbuilder.settings import EXCERPT_MAX_LENGTH

logger = logging.getLogger(__name__)


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise PublishError(f"Cannot write {path}: {exc.strerror or exc}", path=path) from exc


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------

def plan_posts(
    drafts: list[Draft],
    href_base: str,
    max_excerpt_length: int = EXCERPT_MAX_LENGTH,
) -> list[Publication]:
    """Read every draft and build its Post, in scan order.

    Slug collisions are resolved first-seen-wins, so the order of *drafts*
    decides which draft keeps the bare slug.  Nothing is written.
    """
    seen: dict[str, int] = {}
    publications: list[Publication] = []

    for draft in drafts:
        content = read_draft(draft)
        slug = unique_slug(slugify(draft.base_name), seen)
        filename = f"{slug}{draft.extension.lower()}"

        meta = extract_metadata(
            content.decode("utf-8", errors="replace"),
            fallback_title=humanize_slug(slug),
            max_excerpt_length=max_excerpt_length,
        )
        post = Post(
            slug=slug,
            title=meta.title,
            excerpt=meta.excerpt,
            href=posixpath.join(href_base, filename) if href_base else filename,
        )
        logger.debug("Planned %s → %s (%r)", draft.name, filename, post.title)
        publications.append(
            Publication(post=post, content=content, source=draft.path, filename=filename),
        )

    return publications


def sort_posts(posts: list[Post]) -> list[Post]:
    """Order posts by title using a locale-style comparison (stable on ties)."""
    return sorted(posts, key=lambda p: collation_key(p.title))


def render_manifest(posts: list[Post]) -> str:
    """Serialize *posts* as pretty-printed JSON with a trailing newline."""
    return json.dumps([p.model_dump() for p in posts], indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

def publish(
    publications: list[Publication],
    posts: list[Post],
    out_dir: Path,
    manifest_path: Path,
) -> list[Path]:
    """Write every published document and the manifest; return the paths written.

    *posts* is written to the manifest in the order given, which is the
    order the index listing uses too.

    Existing files of the same name are overwritten; files from earlier
    builds that no longer correspond to a draft are left alone.

    Raises:
        PublishError: if the output directory or any file cannot be written.
    """
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        manifest_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PublishError(
            f"Cannot create output directory {out_dir}: {exc.strerror or exc}",
            path=out_dir,
        ) from exc

    written: list[Path] = []
    for pub in publications:
        path = out_dir / pub.filename
        _write_bytes(path, pub.content)
        written.append(path)

    _write_bytes(manifest_path, render_manifest(posts).encode("utf-8"))
    written.append(manifest_path)

    logger.info("Published %d post(s) to %s", len(publications), out_dir)
    return written
