"""Default settings for blogbuilder.

There is no configuration file and no environment lookup: these constants
are the defaults, and the CLI overrides them per invocation.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Site layout (relative to --root)
# ---------------------------------------------------------------------------
DRAFTS_DIRNAME = "drafts"
OUTPUT_DIRNAME = "blog"
INDEX_FILENAME = "index.html"
MANIFEST_FILENAME = "posts.json"

# ---------------------------------------------------------------------------
# Drafts
# ---------------------------------------------------------------------------
DRAFT_EXTENSION = ".html"

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------
EXCERPT_MAX_LENGTH = 200
ELLIPSIS = "…"

# Slug used when a file name normalizes to nothing (e.g. "???.html")
SLUG_PLACEHOLDER = "post"

# ---------------------------------------------------------------------------
# Index document
# ---------------------------------------------------------------------------
START_MARKER = "<!-- BLOG:START -->"
END_MARKER = "<!-- BLOG:END -->"

EMPTY_LISTING_MESSAGE = "No blog posts available yet. Check back soon!"
READ_MORE_LABEL = "Read More →"
