"""Builders for draft and index documents used across the test modules."""

from __future__ import annotations

from blogbuilder.settings import END_MARKER, START_MARKER

INDEX_TEMPLATE = f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <title>Home</title>
  </head>
  <body>
    <section id="blog">
      <h2>Blog</h2>
      {START_MARKER}
      <p>stale listing</p>
      {END_MARKER}
    </section>
    <footer>&copy; 2024</footer>
  </body>
</html>
"""

LONG_PARAGRAPH = " ".join(["Drafting"] + ["words and more words"] * 12)


def draft_html(title: str | None = None, body: str = "") -> str:
    head = f"<title>{title}</title>" if title is not None else ""
    return f"<!DOCTYPE html>\n<html><head>{head}</head><body>{body}</body></html>\n"
