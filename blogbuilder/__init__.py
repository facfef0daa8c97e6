"""blogbuilder - publish HTML drafts as a blog section and sync the homepage listing.

Quick usage::

    from pathlib import Path
    from blogbuilder import BuildConfig, build

    result = build(BuildConfig.from_root(Path(".")))
    for post in result.posts:
        print(post.slug, post.title)

Command line::

    python -m blogbuilder --root path/to/site
"""

from blogbuilder.builder import BuildConfig, BuildResult, build
from blogbuilder.errors import BuildError, DraftScanError, MarkerError, PublishError
from blogbuilder.items import Draft, Post

__version__ = "0.1.0"
__all__ = [
    "BuildConfig",
    "BuildError",
    "BuildResult",
    "Draft",
    "DraftScanError",
    "MarkerError",
    "Post",
    "PublishError",
    "build",
]
