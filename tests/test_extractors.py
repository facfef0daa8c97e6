"""Unit tests for title/excerpt extraction and text helpers."""

from __future__ import annotations

from blogbuilder.extractors import (
    clean_whitespace,
    collation_key,
    extract_metadata,
    shorten_excerpt,
)

from tests.helpers import LONG_PARAGRAPH, draft_html

# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

class TestTitleExtraction:
    def test_title_element_wins(self):
        html = draft_html("Hello, World!", "<h1>Heading</h1>")
        assert extract_metadata(html, "Fallback").title == "Hello, World!"

    def test_first_h1_when_no_title(self):
        html = draft_html(None, "<h1>First</h1><h1>Second</h1>")
        assert extract_metadata(html, "Fallback").title == "First"

    def test_nested_markup_stripped_from_h1(self):
        html = draft_html(None, "<h1 class='x'>Big <em>News</em>&nbsp;Today</h1>")
        assert extract_metadata(html).title == "Big News Today"

    def test_entities_decoded(self):
        html = draft_html("Tom &amp; Jerry&rsquo;s &ldquo;Show&rdquo; &mdash; Part&nbsp;1&hellip;")
        assert extract_metadata(html).title == "Tom & Jerry’s “Show” — Part 1…"

    def test_numeric_references_decoded(self):
        html = draft_html("It&#39;s &#8211; done &#8230;")
        assert extract_metadata(html).title == "It's – done …"

    def test_whitespace_collapsed(self):
        html = draft_html("\n   Spread \t over\n\n lines   ")
        assert extract_metadata(html).title == "Spread over lines"

    def test_blank_title_uses_fallback_not_h1(self):
        html = draft_html("   ", "<h1>Heading</h1>")
        assert extract_metadata(html, "My Post").title == "My Post"

    def test_nested_tags_stripped_from_title(self):
        html = "<html><head><title>Hello <em>World</em></title></head></html>"
        assert extract_metadata(html, "Fallback").title == "Hello World"

    def test_title_with_only_tags_uses_fallback(self):
        html = "<html><head><title><b></b></title></head><body><h1>Heading</h1></body></html>"
        assert extract_metadata(html, "My Post").title == "My Post"

    def test_fallback_used_when_nothing_found(self):
        html = draft_html(None, "<div>No headings here</div>")
        assert extract_metadata(html, "My First Post").title == "My First Post"

    def test_uppercase_tags_matched(self):
        html = "<HTML><HEAD><TITLE>Shouting</TITLE></HEAD></HTML>"
        assert extract_metadata(html).title == "Shouting"


# ---------------------------------------------------------------------------
# Excerpt
# ---------------------------------------------------------------------------

class TestExcerptExtraction:
    def test_meta_description_preferred(self):
        html = (
            "<html><head><meta name=\"description\" content=\"From the meta.\"></head>"
            "<body><p>From the paragraph.</p></body></html>"
        )
        assert extract_metadata(html).excerpt == "From the meta."

    def test_meta_attribute_order_and_quoting(self):
        html = (
            "<html><head><meta content='A &quot;quoted&quot; summary' NAME='Description'>"
            "</head><body><p>ignored</p></body></html>"
        )
        assert extract_metadata(html).excerpt == 'A "quoted" summary'

    def test_meta_content_tags_stripped(self):
        html = (
            "<html><head><meta name='description' content='<b>Bold</b> text'></head>"
            "<body><p>ignored</p></body></html>"
        )
        assert extract_metadata(html).excerpt == "Bold text"

    def test_meta_without_content_falls_back_to_paragraph(self):
        html = "<html><head><meta name=\"description\"></head><body><p>Para text.</p></body></html>"
        assert extract_metadata(html).excerpt == "Para text."

    def test_first_paragraph_with_nested_markup(self):
        html = draft_html("T", '<p>First <a href="#">linked</a> para.</p><p>Second</p>')
        assert extract_metadata(html).excerpt == "First linked para."

    def test_escaped_markup_in_paragraph_kept_as_text(self):
        html = draft_html("T", "<p>Use &lt;div&gt; &amp; friends</p>")
        assert extract_metadata(html).excerpt == "Use <div> & friends"

    def test_no_source_gives_empty_excerpt(self):
        html = draft_html("T", "<div>nothing</div>")
        assert extract_metadata(html).excerpt == ""

    def test_long_paragraph_truncated(self):
        html = draft_html("T", f"<p>{LONG_PARAGRAPH}</p>")
        excerpt = extract_metadata(html).excerpt
        assert len(LONG_PARAGRAPH) > 200
        assert len(excerpt) <= 200
        assert excerpt.endswith("…")

    def test_custom_cap(self):
        html = draft_html("T", "<p>one two three four five six</p>")
        excerpt = extract_metadata(html, max_excerpt_length=12).excerpt
        assert excerpt == "one two…"

    def test_empty_document(self):
        meta = extract_metadata("", "Fallback")
        assert meta.title == "Fallback"
        assert meta.excerpt == ""


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

class TestShortenExcerpt:
    def test_short_text_unchanged(self):
        text = "Short enough, already."
        assert shorten_excerpt(text, 200) is text

    def test_exact_length_unchanged(self):
        text = "x" * 200
        assert shorten_excerpt(text, 200) == text

    def test_partial_word_dropped(self):
        text = "a" * 10 + " " + "b" * 10
        assert shorten_excerpt(text, 15) == "aaaaaaaaaa…"

    def test_cut_on_boundary_keeps_last_word(self):
        assert shorten_excerpt("hello world again", 12) == "hello world…"

    def test_trailing_punctuation_stripped(self):
        assert shorten_excerpt("one two, three", 9) == "one two…"

    def test_single_long_word_hard_cut(self):
        result = shorten_excerpt("x" * 300, 200)
        assert result == "x" * 199 + "…"

    def test_never_exceeds_cap_and_never_splits_words(self):
        text = LONG_PARAGRAPH
        for cap in range(20, 260, 7):
            result = shorten_excerpt(text, cap)
            assert len(result) <= cap
            if result != text:
                stem = result[:-1]
                assert text.startswith(stem)
                assert text[len(stem)] in " ,"


class TestCleanWhitespace:
    def test_nbsp_collapsed(self):
        assert clean_whitespace("\u00a0a\u00a0 b \n") == "a b"


class TestCollationKey:
    def test_case_insensitive_ordering(self):
        titles = ["banana", "Apple", "Zebra", "cherry"]
        assert sorted(titles, key=collation_key) == ["Apple", "banana", "cherry", "Zebra"]

    def test_accents_sort_with_base_letter(self):
        titles = ["Zulu", "Éclair", "Delta", "echo"]
        assert sorted(titles, key=collation_key) == ["Delta", "echo", "Éclair", "Zulu"]

    def test_lowercase_before_uppercase_on_case_only_difference(self):
        titles = ["Apple", "apple", "APPLE"]
        assert sorted(titles, key=collation_key) == ["apple", "Apple", "APPLE"]
