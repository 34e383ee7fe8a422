"""
Tests for SEO meta escaping and title formatting.

Tests:
- HTML text and attribute escaping, including invalid input
- Backtick attribute rule (mXSS)
- Title mask substitution, separator trimming and length fallback
"""

from __future__ import annotations

import pytest

from src.components.seo_meta import (
    DEFAULT_TITLE_FORMAT,
    escape_html,
    escape_html_attr,
    format_title,
)

# --- escape_html ---


class TestEscapeHtml:
    """Test HTML text escaping."""

    def test_escapes_special_characters(self) -> None:
        """All five special characters are escaped."""
        assert escape_html("<a href=\"x\">Tom & Jerry's</a>") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
        )

    def test_plain_text_unchanged(self) -> None:
        """Text without special characters is unchanged."""
        assert escape_html("Hello world") == "Hello world"

    def test_existing_entities_are_double_encoded(self) -> None:
        """Ampersands of existing entities are escaped again."""
        assert escape_html("&amp;") == "&amp;amp;"

    def test_unicode_preserved(self) -> None:
        """Non-ASCII text passes through."""
        assert escape_html("Příliš žluťoučký kůň") == "Příliš žluťoučký kůň"

    def test_invalid_utf8_bytes_are_substituted(self) -> None:
        """Invalid byte sequences become U+FFFD instead of raising."""
        assert escape_html(b"ab\xffc<") == "ab\ufffdc&lt;"

    def test_lone_surrogate_is_substituted(self) -> None:
        """Lone surrogates never reach the output."""
        result = escape_html("a\ud800b")
        assert result == "a\ufffdb"
        result.encode("utf-8")


# --- escape_html_attr ---


class TestEscapeHtmlAttr:
    """Test HTML attribute escaping."""

    def test_escapes_quotes_and_brackets(self) -> None:
        """Quotes and brackets cannot break out of the attribute."""
        result = escape_html_attr('"><script>alert(1)</script>')
        assert '"' not in result
        assert "<" not in result
        assert ">" not in result

    def test_backtick_without_delimiters_gets_trailing_space(self) -> None:
        """Backtick-only values are padded with a single space."""
        assert escape_html_attr("`onload=alert(1)`") == "`onload=alert(1)` "

    def test_backtick_padding_adds_exactly_one_character(self) -> None:
        """Padding increases length by exactly one."""
        value = "a`b"
        assert len(escape_html_attr(value)) == len(value) + 1

    @pytest.mark.parametrize("value", ["a` b", "a`<", "a`>", 'a`"', "a`'"])
    def test_backtick_with_delimiter_not_padded(self, value: str) -> None:
        """Values already containing a delimiter are not padded."""
        assert escape_html_attr(value) == escape_html(value)

    def test_no_backtick_not_padded(self) -> None:
        """Values without backtick are escaped only."""
        assert escape_html_attr("https://example.com/?a=1&b=2") == (
            "https://example.com/?a=1&amp;b=2"
        )

    def test_double_false_keeps_existing_entities(self) -> None:
        """Existing entities are kept when double encoding is disabled."""
        assert escape_html_attr("Tom &amp; Jerry & co", double=False) == (
            "Tom &amp; Jerry &amp; co"
        )

    def test_double_false_still_escapes_quotes(self) -> None:
        """Disabling double encoding does not disable escaping."""
        assert escape_html_attr('&#39;"', double=False) == "&#39;&quot;"

    @pytest.mark.parametrize("entity", ["&hellip;", "&AMP;", "&#169;", "&#x1F600;", "&#9;"])
    def test_double_false_keeps_valid_entities(self, entity: str) -> None:
        """Named entities from the HTML5 table and allowed code points are kept."""
        assert escape_html_attr(f"a {entity} b", double=False) == f"a {entity} b"

    @pytest.mark.parametrize(
        "entity",
        ["&foo;", "&#0;", "&#xD800;", "&#x110000;", "&#xFFFE;", "&#xFDD0;", "&#11;"],
    )
    def test_double_false_reencodes_invalid_entities(self, entity: str) -> None:
        """Unknown names and disallowed code points are escaped like plain text."""
        assert escape_html_attr(entity, double=False) == "&amp;" + entity[1:]

    def test_double_false_entity_without_semicolon(self) -> None:
        """An entity needs its terminating semicolon to be kept."""
        assert escape_html_attr("&amp &amp;", double=False) == "&amp;amp &amp;"


# --- format_title ---


class TestFormatTitle:
    """Test title mask formatting."""

    def test_default_mask_with_suffix(self) -> None:
        """Title, separator and suffix are substituted."""
        assert format_title(DEFAULT_TITLE_FORMAT, "About", "|", "My Site") == "About | My Site"

    def test_default_separator(self) -> None:
        """None separator defaults to '|'."""
        assert format_title(DEFAULT_TITLE_FORMAT, "About", None, "My Site") == "About | My Site"

    def test_missing_suffix_removes_separator(self) -> None:
        """No dangling separator without suffix."""
        assert format_title(DEFAULT_TITLE_FORMAT, "Home", None, None) == "Home"

    def test_separator_is_trimmed(self) -> None:
        """Whitespace around the separator is ignored."""
        assert format_title(DEFAULT_TITLE_FORMAT, "About", "  -  ", "Site") == "About - Site"

    def test_leading_separator_trimmed(self) -> None:
        """Separators at the start are removed."""
        assert format_title("{{ separator }} {{ title }}", "About", "|", None) == "About"

    def test_separator_trim_uses_character_set(self) -> None:
        """Every character of the separator is trimmed from both ends."""
        assert format_title("{{ title }} {{ separator }}", "About", "-|", None) == "About"

    def test_internal_whitespace_collapsed(self) -> None:
        """Whitespace runs become one space."""
        assert format_title("{{ title }}   {{ separator }}\t{{ suffix }}", "A", "|", "B") == "A | B"

    def test_custom_mask(self) -> None:
        """Custom masks are honored."""
        assert format_title("{{ suffix }}: {{ title }}", "News", None, "Blog") == "Blog: News"

    def test_exactly_70_characters_kept(self) -> None:
        """A 70 character result is returned formatted."""
        title = "x" * 63
        result = format_title(DEFAULT_TITLE_FORMAT, title, "|", "Site")
        assert len(result) == 70
        assert result == f"{title} | Site"

    def test_over_70_characters_returns_bare_title(self) -> None:
        """Results over 70 characters fall back to the title."""
        title = "x" * 64
        assert format_title(DEFAULT_TITLE_FORMAT, title, "|", "Site") == title

    def test_length_counts_characters_not_bytes(self) -> None:
        """Multi-byte characters count as one."""
        title = "ž" * 63
        assert format_title(DEFAULT_TITLE_FORMAT, title, "|", "Site") == f"{title} | Site"

    def test_long_title_returned_even_if_over_limit(self) -> None:
        """The bare title is returned untouched, even when long itself."""
        title = "Long " * 20
        assert format_title(DEFAULT_TITLE_FORMAT, title, "|", None) == title
