"""CLI entry point: python -m blogbuilder [--root DIR] [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from blogbuilder.builder import BuildConfig, BuildResult, build
from blogbuilder.errors import BuildError
from blogbuilder.settings import EXCERPT_MAX_LENGTH, MANIFEST_FILENAME

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blogbuilder",
        description=(
            "Publish a folder of HTML drafts into the blog section and\n"
            "regenerate the post listing between the homepage markers."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--root", default=".", metavar="DIR",
                        help="Site root holding drafts/, blog/ and index.html (default: .)")
    parser.add_argument("--drafts", default=None, metavar="DIR",
                        help="Drafts directory (default: ROOT/drafts)")
    parser.add_argument("--out", default=None, metavar="DIR",
                        help="Published posts directory (default: ROOT/blog)")
    parser.add_argument("--index", default=None, metavar="FILE",
                        help="Homepage to patch (default: ROOT/index.html)")
    parser.add_argument("--manifest", default=None, metavar="FILE",
                        help="Manifest path (default: OUT/posts.json)")
    parser.add_argument("--excerpt-length", type=int, default=EXCERPT_MAX_LENGTH, metavar="N",
                        help=f"Maximum excerpt length, ellipsis included (default: {EXCERPT_MAX_LENGTH})")
    parser.add_argument("--dry-run", action="store_true", default=False,
                        help="Scan, extract and validate the index without writing anything")
    parser.add_argument("--summary", action="store_true", default=False,
                        help="Print a table of the published posts")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _config_from_args(args: argparse.Namespace) -> BuildConfig:
    root = Path(args.root)
    out_dir = Path(args.out) if args.out else None
    manifest = Path(args.manifest) if args.manifest else None
    if manifest is None and out_dir is not None:
        manifest = out_dir / MANIFEST_FILENAME
    return BuildConfig.from_root(
        root,
        drafts_dir=Path(args.drafts) if args.drafts else None,
        out_dir=out_dir,
        index_path=Path(args.index) if args.index else None,
        manifest_path=manifest,
        excerpt_length=args.excerpt_length,
        dry_run=args.dry_run,
    )


def _print_summary(result: BuildResult) -> None:
    console = Console()
    tbl = Table(
        title=f"[bold green]Posts ({len(result.posts)})[/bold green]",
        box=box.SIMPLE_HEAVY,
        show_lines=False,
    )
    tbl.add_column("#", style="dim", justify="right", width=4, no_wrap=True)
    tbl.add_column("Slug", style="cyan", max_width=32, no_wrap=True)
    tbl.add_column("Title", style="green", max_width=40, no_wrap=True)
    tbl.add_column("Href", style="blue", max_width=40, no_wrap=True)

    for i, post in enumerate(result.posts, 1):
        tbl.add_row(str(i), post.slug, post.title, post.href)
    console.print(tbl)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.excerpt_length < 2:
        print(f"ERROR: --excerpt-length must be at least 2, got {args.excerpt_length}", file=sys.stderr)
        return 1

    _configure_logging(args.log_level)
    config = _config_from_args(args)

    try:
        result = build(config)
    except BuildError as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        _print_summary(result)

    count = len(result.posts)
    suffix = " (dry run, nothing written)" if result.dry_run else ""
    print(f"Processed {count} post{'' if count == 1 else 's'}.{suffix}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
