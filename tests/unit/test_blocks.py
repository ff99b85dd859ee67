#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the shared block policy and the block renderers."""

import pytest

from semadoc.ast import DocumentNode, DocumentSettings, NodeType
from semadoc.options import HtmlConverterOptions
from semadoc.renderers import SemanticConverter
from semadoc.renderers.attributes import build_title
from semadoc.renderers.blocks import listing, literal, paragraph, quote, resolve_theme, wrap_block


@pytest.mark.unit
class TestWrapBlock:
    """Tests for the collapsible and title wrapping policy."""

    def test_collapsible_without_title(self):
        node = DocumentNode(NodeType.PARAGRAPH, attributes={"collapsible-option": ""})
        assert wrap_block(node, "<p>x</p>", "") == "<details><summary>Details</summary><p>x</p></details>"

    def test_collapsible_open_with_captioned_title(self):
        node = DocumentNode(
            NodeType.LISTING,
            title="Code & more",
            caption="Listing 1. ",
            attributes={"collapsible-option": "", "open-option": ""},
        )
        result = wrap_block(node, "<pre>x</pre>", build_title(node))
        assert result == "<details open><summary>Listing 1. Code &amp; more</summary><pre>x</pre></details>"

    def test_title_before_element(self):
        node = DocumentNode(NodeType.PARAGRAPH, title="Heads up")
        assert wrap_block(node, "<p>x</p>", build_title(node)) == "<summary>Heads up</summary><p>x</p>"

    def test_plain_block_unchanged(self):
        node = DocumentNode(NodeType.PARAGRAPH)
        assert wrap_block(node, "<p>x</p>", "") == "<p>x</p>"


@pytest.mark.unit
class TestParagraph:
    """Tests for the paragraph renderer."""

    def test_bare_paragraph(self, converter):
        node = DocumentNode(NodeType.PARAGRAPH, content="Hello <em>world</em>")
        assert paragraph(node, converter) == "<p>Hello <em>world</em></p>"

    def test_id_roles_and_title(self, converter):
        node = DocumentNode(NodeType.PARAGRAPH, id="p1", roles=("lead",), title="Intro", content="Hi")
        assert paragraph(node, converter) == '<summary>Intro</summary><p id="p1" class="lead">Hi</p>'

    def test_configured_title_tag(self, highlighter):
        converter = SemanticConverter(HtmlConverterOptions(title_tag="h6"), highlighter=highlighter)
        node = DocumentNode(NodeType.PARAGRAPH, title="Intro", content="Hi")
        assert paragraph(node, converter) == "<h6>Intro</h6><p>Hi</p>"

    def test_never_wrapped_in_container(self, converter):
        node = DocumentNode(NodeType.PARAGRAPH, content="Hi")
        assert "paragraph" not in paragraph(node, converter)


@pytest.mark.unit
class TestListing:
    """Tests for the listing renderer."""

    def test_source_listing_highlighted(self, converter, highlighter):
        node = DocumentNode(
            NodeType.LISTING,
            attributes={"style": "source", "language": "javascript"},
            content="const a = 1 &lt; 2;",
        )
        assert listing(node, converter) == (
            '<pre class="highlight"><code class="language-javascript">'
            "[javascript:monokai]const a = 1 &lt; 2;</code></pre>"
        )
        assert highlighter.calls == [("const a = 1 &lt; 2;", "javascript", "monokai")]

    def test_unknown_language_highlighted_as_plaintext(self, converter, highlighter):
        node = DocumentNode(NodeType.LISTING, attributes={"style": "source", "language": "klingon"}, content="x")
        result = listing(node, converter)
        assert 'class="language-klingon"' in result
        assert highlighter.calls[0][1] == "plaintext"

    def test_default_language(self, converter):
        node = DocumentNode(NodeType.LISTING, content="x")
        assert listing(node, converter) == '<pre><code class="language-plaintext">[plaintext:monokai]x</code></pre>'

    def test_highlighting_disabled(self, highlighter):
        converter = SemanticConverter(HtmlConverterOptions(syntax_highlighting=False), highlighter=highlighter)
        node = DocumentNode(NodeType.LISTING, attributes={"language": "python"}, content="a &lt; b")
        assert listing(node, converter) == '<pre><code class="language-python">a &lt; b</code></pre>'
        assert highlighter.calls == []

    def test_document_theme_wins(self, highlighter):
        converter = SemanticConverter(HtmlConverterOptions(highlight_theme="default"), highlighter=highlighter)
        settings = DocumentSettings({"highlight-theme": "friendly"})
        node = DocumentNode(NodeType.LISTING, attributes={"language": "python"}, document=settings)
        assert resolve_theme(node, converter) == "friendly"

    def test_options_theme_before_default(self, highlighter):
        converter = SemanticConverter(HtmlConverterOptions(highlight_theme="default"), highlighter=highlighter)
        node = DocumentNode(NodeType.LISTING)
        assert resolve_theme(node, converter) == "default"

    def test_titled_listing(self, converter):
        node = DocumentNode(NodeType.LISTING, id="code", title="Example", attributes={"language": "python"})
        result = listing(node, converter)
        assert result.startswith('<summary>Example</summary><pre id="code">')


@pytest.mark.unit
class TestLiteralAndQuote:
    """Tests for the literal and quote renderers."""

    def test_literal(self, converter):
        node = DocumentNode(NodeType.LITERAL, attributes={"style": "literal"}, content="a &lt; b")
        assert literal(node, converter) == "<pre>a &lt; b</pre>"

    def test_quote_with_attribution(self, converter):
        node = DocumentNode(
            NodeType.QUOTE,
            attributes={"style": "quote", "attribution": "Ada", "citetitle": "Notes"},
            blocks=(DocumentNode(NodeType.PARAGRAPH, content="Hi"),),
        )
        assert quote(node, converter) == (
            "<blockquote><p>Hi</p><footer>— <cite>Ada, Notes</cite></footer></blockquote>"
        )

    def test_quote_without_attribution(self, converter):
        node = DocumentNode(NodeType.QUOTE, blocks=(DocumentNode(NodeType.PARAGRAPH, content="Hi"),))
        assert quote(node, converter) == "<blockquote><p>Hi</p></blockquote>"

    def test_collapsible_quote(self, converter):
        node = DocumentNode(
            NodeType.QUOTE,
            title="Said",
            attributes={"collapsible-option": ""},
            blocks=(DocumentNode(NodeType.PARAGRAPH, content="Hi"),),
        )
        assert quote(node, converter) == "<details><summary>Said</summary><blockquote><p>Hi</p></blockquote></details>"
