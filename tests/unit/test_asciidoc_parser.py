#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the AsciiDoc parser."""

import logging

import pytest

from semadoc.ast import Document, ListNode, NodeType, TableNode
from semadoc.exceptions import InvalidOptionsError, ParsingError
from semadoc.options import AsciiDocParserOptions, HtmlConverterOptions
from semadoc.parsers import AsciiDocParser
from semadoc.parsers.asciidoc import AsciiDocLexer, TokenType, split_attribute_list


def parse(source, **options):
    return AsciiDocParser(AsciiDocParserOptions(**options)).parse(source)


@pytest.mark.unit
class TestLexer:
    """Tests for line tokenization."""

    @pytest.mark.parametrize(
        "line, token_type",
        [
            ("== Section", TokenType.HEADING),
            (".Title", TokenType.BLOCK_TITLE),
            ("----", TokenType.LISTING_DELIMITER),
            ("```python", TokenType.FENCE_DELIMITER),
            ("....", TokenType.LITERAL_DELIMITER),
            ("____", TokenType.QUOTE_DELIMITER),
            ("====", TokenType.EXAMPLE_DELIMITER),
            ("****", TokenType.SIDEBAR_DELIMITER),
            ("--", TokenType.OPEN_DELIMITER),
            ("|===", TokenType.TABLE_DELIMITER),
            ("////", TokenType.COMMENT_DELIMITER),
            ("// note", TokenType.COMMENT),
            ("* item", TokenType.UNORDERED_LIST),
            (". item", TokenType.ORDERED_LIST),
            ("2. item", TokenType.ORDERED_LIST),
            ("Term:: text", TokenType.DESCRIPTION_TERM),
            (":name: value", TokenType.ATTRIBUTE),
            ("[source,python]", TokenType.BLOCK_ATTRIBUTE),
            ("[[anchor]]", TokenType.ANCHOR),
            ("image::a.png[]", TokenType.BLOCK_MACRO),
            ("'''", TokenType.THEMATIC_BREAK),
            ("<<<", TokenType.PAGE_BREAK),
            ("+", TokenType.LIST_CONTINUATION),
            ("Just text", TokenType.TEXT_LINE),
            ("   ", TokenType.BLANK_LINE),
        ],
    )
    def test_line_types(self, line, token_type):
        tokens = AsciiDocLexer(line).tokenize()
        assert tokens[0].type == token_type
        assert tokens[-1].type == TokenType.EOF

    def test_attribute_continuation(self):
        tokens = AsciiDocLexer(":desc: first +\nsecond").tokenize()
        assert tokens[0].metadata["value"] == "first second"

    def test_split_attribute_list(self):
        assert split_attribute_list('quote, "Ada, Countess", Notes') == ["quote", '"Ada, Countess"', "Notes"]


@pytest.mark.unit
class TestHeaderAndAttributes:
    """Tests for the document header and attribute entries."""

    def test_title_and_body(self):
        document = AsciiDocParser().parse("= Title\n\nThis is *bold*.")
        assert isinstance(document, Document)
        assert document.title == "Title"
        assert document.settings.title == "Title"
        assert document.blocks[0].content == "This is <strong>bold</strong>."

    def test_author_and_revision(self):
        document = parse("= Guide\nJane Doe <jane@example.com>\nv1.2, 2025-01-01: Draft\n\nBody")
        settings = document.settings
        assert settings.get("author") == "Jane Doe"
        assert settings.get("email") == "jane@example.com"
        assert settings.get("revnumber") == "1.2"
        assert settings.get("revdate") == "2025-01-01"
        assert settings.get("revremark") == "Draft"
        assert [block.content for block in document.blocks] == ["Body"]

    def test_attribute_reference(self):
        document = parse(":version: 2.0\n\nRelease {version}")
        assert document.blocks[0].content == "Release 2.0"

    def test_locked_preset_wins(self):
        document = parse(":version: 2.0\n\nRelease {version}", attributes={"version": "3.0"})
        assert document.blocks[0].content == "Release 3.0"

    def test_soft_preset_value_yields(self):
        document = parse(":version: 2.0\n\nRelease {version}", attributes={"version": "3.0@"})
        assert document.blocks[0].content == "Release 2.0"

    def test_soft_preset_name_used_when_undefined(self):
        document = parse("Release {version}", attributes={"version@": "3.0"})
        assert document.blocks[0].content == "Release 3.0"

    def test_preset_unset(self):
        document = parse("== Intro\n\nText", attributes={"sectids": None})
        assert document.blocks[0].id is None

    def test_attribute_unset_in_document(self):
        document = parse(":sectids!:\n\n== Intro\n\nText")
        assert document.blocks[0].id is None

    def test_attributes_in_listing_are_content(self):
        document = parse("----\n:name: value\n----\n\n{name}")
        assert document.blocks[0].content == ":name: value"
        assert document.blocks[1].content == "{name}"

    def test_highlight_theme_setting(self):
        document = parse(":highlight-theme: friendly\n\nText")
        assert document.settings.theme == "friendly"
        assert document.blocks[0].document.theme == "friendly"

    def test_attributes_not_parsed(self):
        document = parse(":version: 2.0\n\n{version}", parse_attributes=False)
        assert document.settings.get("version") is None


@pytest.mark.unit
class TestSections:
    """Tests for sections and headings."""

    def test_section_structure(self):
        document = parse("== Getting Started\n\nText\n\n=== Details\n\nMore\n\n== Next")
        first, second = document.blocks
        assert first.node_type == NodeType.SECTION
        assert first.id == "_getting_started"
        assert first.level == 1
        assert [child.node_type for child in first.blocks] == [NodeType.PARAGRAPH, NodeType.SECTION]
        assert first.blocks[1].level == 2
        assert second.title == "Next"

    def test_duplicate_ids(self):
        document = parse("== Intro\n\n== Intro")
        assert [block.id for block in document.blocks] == ["_intro", "_intro_2"]

    def test_explicit_anchor(self):
        document = parse("[[start]]\n== Intro")
        assert document.blocks[0].id == "start"

    def test_section_numbers(self):
        document = parse(":sectnums:\n\n== A\n\n=== B\n\n== C")
        a, c = document.blocks
        assert a.caption == "1. "
        assert a.blocks[0].caption == "1.1. "
        assert c.caption == "2. "

    def test_discrete_heading(self):
        document = parse("[discrete]\n== Floating\n\nText")
        assert [block.node_type for block in document.blocks] == [NodeType.FLOATING_TITLE, NodeType.PARAGRAPH]


@pytest.mark.unit
class TestBlocks:
    """Tests for paragraphs and delimited blocks."""

    def test_block_metadata(self):
        document = parse("[[intro-para]]\n.Intro\n[.lead]\nHello")
        node = document.blocks[0]
        assert node.id == "intro-para"
        assert node.title == "Intro"
        assert node.roles == ("lead",)

    def test_source_listing(self):
        node = parse("[source,python]\n----\nprint('<hi>')\n----").blocks[0]
        assert node.node_type == NodeType.LISTING
        assert node.style == "source"
        assert node.get_attribute("language") == "python"
        assert node.content == "print('&lt;hi&gt;')"

    def test_shorthand_attributes(self):
        node = parse("[source#ex.big%collapsible,python]\n----\nx\n----").blocks[0]
        assert node.id == "ex"
        assert node.roles == ("big",)
        assert node.has_attribute("collapsible-option")
        assert node.get_attribute("language") == "python"

    def test_fenced_code(self):
        node = parse("```js\nlet a;\n```").blocks[0]
        assert node.style == "source"
        assert node.get_attribute("language") == "js"

    def test_default_source_language(self):
        node = parse(":source-language: ruby\n\n[source]\n----\nputs 1\n----").blocks[0]
        assert node.get_attribute("language") == "ruby"

    def test_literal_paragraph(self):
        node = parse("  indented <text>").blocks[0]
        assert node.node_type == NodeType.LITERAL
        assert node.content == "indented &lt;text&gt;"

    def test_admonition_paragraph(self):
        node = parse("NOTE: Be careful.").blocks[0]
        assert node.node_type == NodeType.ADMONITION
        assert node.get_attribute("name") == "note"
        assert node.get_attribute("textlabel") == "Note"
        assert node.content == "Be careful."

    def test_quote_block(self):
        node = parse("[quote, Ada Lovelace, Notes]\n____\nThe engine.\n____").blocks[0]
        assert node.node_type == NodeType.QUOTE
        assert node.get_attribute("attribution") == "Ada Lovelace"
        assert node.get_attribute("citetitle") == "Notes"
        assert node.blocks[0].content == "The engine."

    def test_verse_block(self):
        node = parse("[verse, Poet]\n____\nline one\nline two\n____").blocks[0]
        assert node.node_type == NodeType.QUOTE
        assert node.style == "verse"
        assert node.blocks[0].node_type == NodeType.LITERAL
        assert node.blocks[0].roles == ("content",)
        assert node.blocks[0].content == "line one\nline two"

    def test_collapsible_example(self):
        node = parse(".Details\n[%collapsible]\n====\nHidden\n====").blocks[0]
        assert node.node_type == NodeType.EXAMPLE
        assert node.title == "Details"
        assert node.caption == "Example 1. "
        assert node.option_names() == ("collapsible",)
        assert node.blocks[0].content == "Hidden"

    def test_sidebar_and_open_blocks(self):
        document = parse("****\nAside\n****\n\n--\nOpen\n--")
        assert [block.node_type for block in document.blocks] == [NodeType.SIDEBAR, NodeType.OPEN]

    def test_passthrough_block(self):
        node = parse("++++\n<video></video>\n++++").blocks[0]
        assert node.node_type == NodeType.PASS
        assert node.content == "<video></video>"

    def test_comments_stripped(self):
        document = parse("// note\nText\n\n////\nblock\n////")
        assert [block.node_type for block in document.blocks] == [NodeType.PARAGRAPH]

    def test_comments_kept(self):
        document = parse("// note\n\nText", strip_comments=False)
        assert document.blocks[0].node_type == NodeType.PASS
        assert document.blocks[0].content == "<!-- note -->"

    def test_image_macro(self):
        node = parse(".Architecture\nimage::images/diagram.png[Diagram,300]").blocks[0]
        assert node.node_type == NodeType.IMAGE
        assert node.get_attribute("target") == "images/diagram.png"
        assert node.get_attribute("alt") == "Diagram"
        assert node.get_attribute("width") == "300"
        assert node.caption == "Figure 1. "

    def test_breaks(self):
        document = parse("a\n\n'''\n\n<<<\n\nb")
        types = [block.node_type for block in document.blocks]
        assert types == [NodeType.PARAGRAPH, NodeType.THEMATIC_BREAK, NodeType.PAGE_BREAK, NodeType.PARAGRAPH]

    def test_unterminated_block_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="semadoc.parsers.asciidoc"):
            node = parse("----\nno end").blocks[0]
        assert node.content == "no end"
        assert "Unterminated delimited block" in caplog.text


@pytest.mark.unit
class TestLists:
    """Tests for list parsing."""

    def test_nested_unordered(self):
        node = parse("* a\n* b\n** c").blocks[0]
        assert isinstance(node, ListNode)
        assert [item.text for item in node.items] == ["a", "b"]
        nested = node.items[1].blocks[0]
        assert nested.node_type == NodeType.ULIST
        assert nested.items[0].text == "c"

    def test_ordered_depth_styles(self):
        node = parse(". one\n. two\n.. sub").blocks[0]
        assert node.node_type == NodeType.OLIST
        assert node.style == "arabic"
        assert node.items[1].blocks[0].style == "loweralpha"

    def test_explicit_numbering(self):
        node = parse("3. three\n4. four").blocks[0]
        assert node.style == "arabic"
        assert node.get_attribute("start") == "3"
        assert len(node.items) == 2

    def test_style_from_attribute_list(self):
        node = parse("[upperroman]\n. one\n. two").blocks[0]
        assert node.style == "upperroman"

    def test_checklist(self):
        node = parse("* [x] done\n* [ ] todo").blocks[0]
        assert [item.text for item in node.items] == ["&#10003; done", "&#10063; todo"]
        assert "checklist" in node.roles
        assert node.has_attribute("checklist-option")

    def test_list_continuation(self):
        node = parse("* item\n+\n----\ncode\n----").blocks[0]
        assert node.items[0].blocks[0].node_type == NodeType.LISTING

    def test_description_list(self):
        node = parse("CPU:: The brain\nRAM:: Memory").blocks[0]
        assert node.node_type == NodeType.DLIST
        assert [(item.term, item.text) for item in node.items] == [("CPU", "The brain"), ("RAM", "Memory")]


@pytest.mark.unit
class TestTables:
    """Tests for table parsing."""

    def test_implicit_header(self):
        node = parse("|===\n|A |B\n\n|1 |2\n|===").blocks[0]
        assert isinstance(node, TableNode)
        assert node.rows == (("A", "B"), ("1", "2"))
        assert node.header_row_count == 1

    def test_cols_and_noheader(self):
        node = parse('[cols="1,1",options="noheader"]\n|===\n|a\n|b\n\n|c\n|d\n|===').blocks[0]
        assert node.rows == (("a", "b"), ("c", "d"))
        assert node.header_row_count == 0


@pytest.mark.unit
class TestParserBehavior:
    """Tests for parser-level behavior."""

    def test_lorem_reproducible(self):
        first = parse("lorem::[length=2]", lorem_seed=7)
        second = parse("lorem::[length=2]", lorem_seed=7)
        assert len(first.blocks) == 2
        assert [block.content for block in first.blocks] == [block.content for block in second.blocks]

    def test_lorem_disabled(self):
        node = parse("lorem::[length=2]", enable_lorem=False).blocks[0]
        assert node.node_type == NodeType.PARAGRAPH

    def test_footnotes_collected(self):
        document = parse("A claim.footnote:[Source.]")
        assert [note.text for note in document.footnotes] == ["Source."]

    def test_state_reset_between_parses(self):
        parser = AsciiDocParser()
        parser.parse("A.footnote:[One.]\n\n== Intro")
        document = parser.parse("B.footnote:[Two.]\n\n== Intro")
        assert [note.index for note in document.footnotes] == [1]
        assert document.blocks[1].id == "_intro"

    def test_crlf_and_bom(self):
        document = parse("\ufeff* a\r\n* b\r\n")
        assert [item.text for item in document.blocks[0].items] == ["a", "b"]

    def test_non_string_source(self):
        with pytest.raises(ParsingError):
            AsciiDocParser().parse(b"= Title")

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            AsciiDocParser(HtmlConverterOptions())
