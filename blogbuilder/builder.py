"""blogbuilder.builder — run one build from drafts to patched index.

Usage::

    from pathlib import Path
    from blogbuilder import BuildConfig, build

    result = build(BuildConfig.from_root(Path("site")))
    print(len(result.posts))

Every read and every validation happens before the first write, so a bad
drafts directory or a corrupt index document leaves the output untouched.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from blogbuilder import settings
from blogbuilder.index import patch_index, read_index, write_index
from blogbuilder.items import Post
from blogbuilder.publisher import plan_posts, publish, sort_posts
from blogbuilder.scanner import scan_drafts

logger = logging.getLogger(__name__)


@dataclass
class BuildConfig:
    """Paths and knobs for a single build.

    Args:
        drafts_dir:     Directory scanned for drafts (read-only).
        out_dir:        Directory receiving ``<slug>.html`` copies.
        index_path:     Homepage holding the listing markers.
        manifest_path:  JSON manifest location.
        excerpt_length: Excerpt cap in characters, ellipsis included.
        extension:      Draft file extension, matched case-insensitively.
        dry_run:        Do everything except write.
    """

    drafts_dir: Path
    out_dir: Path
    index_path: Path
    manifest_path: Path
    excerpt_length: int = settings.EXCERPT_MAX_LENGTH
    extension: str = settings.DRAFT_EXTENSION
    dry_run: bool = False

    @classmethod
    def from_root(cls, root: Path, **overrides: object) -> BuildConfig:
        """Default site layout under *root*: drafts/, blog/, index.html, blog/posts.json."""
        out_dir = root / settings.OUTPUT_DIRNAME
        values: dict[str, object] = {
            "drafts_dir": root / settings.DRAFTS_DIRNAME,
            "out_dir": out_dir,
            "index_path": root / settings.INDEX_FILENAME,
            "manifest_path": out_dir / settings.MANIFEST_FILENAME,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]

    @property
    def href_base(self) -> str:
        """Output directory relative to the index document, POSIX-style."""
        rel = os.path.relpath(self.out_dir.resolve(), self.index_path.resolve().parent)
        rel_posix = PurePath(rel).as_posix()
        return "" if rel_posix == "." else rel_posix


@dataclass
class BuildResult:
    posts: list[Post]
    written: list[Path] = field(default_factory=list)
    dry_run: bool = False


def build(config: BuildConfig) -> BuildResult:
    """Scan, extract, publish and patch the index.

    Raises:
        BuildError: (or a subclass) on any fatal failure; see
            :mod:`blogbuilder.errors`.
    """
    if config.excerpt_length < 2:
        raise ValueError(f"excerpt_length must be at least 2, got {config.excerpt_length}")

    drafts = scan_drafts(config.drafts_dir, config.extension)
    publications = plan_posts(drafts, config.href_base, config.excerpt_length)
    posts = sort_posts([pub.post for pub in publications])

    index_text = read_index(config.index_path)
    patched = patch_index(index_text, posts)

    if config.dry_run:
        logger.info("Dry run: %d post(s) planned, nothing written", len(posts))
        return BuildResult(posts=posts, dry_run=True)

    written = publish(publications, posts, config.out_dir, config.manifest_path)
    write_index(config.index_path, patched)
    written.append(config.index_path)

    return BuildResult(posts=posts, written=written)
