#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the text and HTML utility helpers."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from semadoc.utils.html_utils import contains_markup, escape_html, unescape_html
from semadoc.utils.text import dedent, slugify, strip_tags

source_lines = st.lists(st.text(alphabet=" \t*-=abc", max_size=12), max_size=8)
content_lines = st.lists(
    st.one_of(st.just(""), st.text(alphabet=" \t*-=abc", min_size=1, max_size=12).filter(str.strip)), max_size=8
)


@pytest.mark.unit
class TestDedent:
    """Tests for dedent."""

    def test_common_indent_removed(self):
        assert dedent("\n    * a\n      * b\n  ") == "* a\n  * b"

    def test_line_terminators_normalized(self):
        assert dedent("  a\r\n  b\r  c") == "a\nb\nc"

    def test_blank_lines_inside_kept(self):
        assert dedent("  a\n\n  b") == "a\n\nb"

    def test_short_whitespace_line_left_alone(self):
        assert dedent("    a\n  \n    b") == "a\n  \nb"

    def test_tabs_count_as_indent(self):
        assert dedent("\ta\n\tb") == "a\nb"

    def test_empty_and_blank(self):
        assert dedent("") == ""
        assert dedent(" \n\t\n") == ""

    def test_unindented_text_unchanged(self):
        assert dedent("a\n  b") == "a\n  b"

    @given(source_lines)
    def test_idempotent(self, lines):
        text = "\n".join(lines)
        once = dedent(text)
        assert dedent(once) == once

    @given(content_lines, st.integers(min_value=0, max_value=6))
    def test_uniform_indent_removed(self, lines, width):
        text = "\n".join(lines)
        indented = "\n".join(" " * width + line if line.strip() else line for line in lines)
        assert dedent(indented) == dedent(text)


@pytest.mark.unit
class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Getting Started", "_getting_started"),
            ("Café au lait", "_cafe_au_lait"),
            ("A & B", "_a_b"),
            ("v1.2 Release", "_v1_2_release"),
            ("!!!", "_section"),
        ],
    )
    def test_slugs(self, text, expected):
        assert slugify(text) == expected

    def test_custom_prefix_and_separator(self):
        assert slugify("Getting Started", prefix="sec-", separator="-") == "sec-getting-started"

    def test_collisions_numbered(self):
        seen = set()
        assert [slugify("Intro", seen_slugs=seen) for _ in range(3)] == ["_intro", "_intro_2", "_intro_3"]
        assert seen == {"_intro", "_intro_2", "_intro_3"}


@pytest.mark.unit
class TestHtmlHelpers:
    """Tests for the HTML helpers."""

    def test_escape_and_unescape(self):
        assert escape_html('<a href="x">') == "&lt;a href=&quot;x&quot;&gt;"
        assert escape_html('"', quote=False) == '"'
        assert escape_html("<", enabled=False) == "<"
        assert unescape_html("&lt;b&gt; &amp; &#169;") == "<b> & ©"

    def test_contains_markup(self):
        assert contains_markup("a <em>b</em>")
        assert not contains_markup("a &lt; b")

    def test_strip_tags(self):
        assert strip_tags('<a href="#x">Intro <em>now</em></a>') == "Intro now"
