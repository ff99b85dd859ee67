#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/fallback.py
"""Generic HTML5 renderer for every node type.

``GenericHtmlRenderer`` produces the conventional AsciiDoc HTML5 structure,
with ``<div class="...block">`` wrapper containers and ``<div class="title">``
titles. The semantic converter uses it for node types that have no semantic
renderer (sections, admonitions, tables, ...) and for the document envelope.

Child blocks are converted through ``child_converter``, so a renderer wired
to a ``SemanticConverter`` hands paragraphs, listings and lists back to the
semantic renderers.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from semadoc.ast import Document, DocumentNode, ListNode, NodeType, TableNode
from semadoc.constants import ADMONITION_TYPES, COLLAPSIBLE_OPTION, DEFAULT_SUMMARY_TEXT, OPEN_OPTION
from semadoc.options.html import HtmlConverterOptions
from semadoc.renderers.attributes import build_class, build_id, build_other_attributes, has_option
from semadoc.utils.html_utils import escape_html

logger = logging.getLogger(__name__)

TRANSFORM_DOCUMENT = "document"
TRANSFORM_EMBEDDED = "embedded"

Handler = Callable[[DocumentNode, Optional[str]], str]


class GenericHtmlRenderer:
    """Render document nodes to conventional AsciiDoc-style HTML5.

    Parameters
    ----------
    options : HtmlConverterOptions or None, default = None
        Conversion options (envelope language and title)
    child_converter : callable or None, default = None
        Function used to convert child blocks; defaults to this renderer

    """

    def __init__(
        self,
        options: HtmlConverterOptions | None = None,
        child_converter: Optional[Callable[[DocumentNode], str]] = None,
    ):
        """Initialize the renderer and its node handler table."""
        self.options = options or HtmlConverterOptions()
        self._convert_child = child_converter or self.convert
        self._handlers: dict[NodeType, Handler] = {
            NodeType.DOCUMENT: self.visit_document,
            NodeType.SECTION: self.visit_section,
            NodeType.FLOATING_TITLE: self.visit_floating_title,
            NodeType.PARAGRAPH: self.visit_paragraph,
            NodeType.LISTING: self.visit_listing,
            NodeType.LITERAL: self.visit_literal,
            NodeType.QUOTE: self.visit_quote,
            NodeType.ULIST: self.visit_ulist,
            NodeType.OLIST: self.visit_olist,
            NodeType.DLIST: self.visit_dlist,
            NodeType.ADMONITION: self.visit_admonition,
            NodeType.EXAMPLE: self.visit_example,
            NodeType.SIDEBAR: self.visit_sidebar,
            NodeType.OPEN: self.visit_open,
            NodeType.IMAGE: self.visit_image,
            NodeType.PASS: self.visit_pass,
            NodeType.TABLE: self.visit_table,
            NodeType.THEMATIC_BREAK: self.visit_thematic_break,
            NodeType.PAGE_BREAK: self.visit_page_break,
        }

    def convert(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render ``node``; ``transform`` selects the document envelope for the root.

        Parameters
        ----------
        node : DocumentNode
            Node to render
        transform : str, optional
            ``"document"`` for a complete HTML page, ``"embedded"`` (or None)
            for the body fragment only

        Returns
        -------
        str
            HTML

        """
        handler = self._handlers.get(node.node_type)
        if handler is None:
            logger.warning("No HTML handler for node type %s; rendering its children only", node.node_type)
            return self._children(node)
        return handler(node, transform)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _children(self, node: DocumentNode) -> str:
        return "\n".join(self._convert_child(child) for child in node.blocks)

    @staticmethod
    def _title_div(node: DocumentNode) -> str:
        if not node.title:
            return ""
        return f'<div class="title">{escape_html(node.captioned_title)}</div>\n'

    @staticmethod
    def _block_open(node: DocumentNode, block_class: str, exclude: tuple[str, ...] = ()) -> str:
        """Opening ``<div>`` of a wrapper container with id, classes and attributes."""
        attributes = build_other_attributes(node, exclude=exclude)
        return f"<div{build_id(node)}{build_class(node, (block_class,))}{attributes}>"

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render the document body, wrapped in a full HTML page for ``"document"``."""
        settings = node.document
        body = self._children(node)
        footnotes = self._footnotes(node)

        if transform != TRANSFORM_DOCUMENT:
            parts = []
            if node.title and settings.has("showtitle"):
                parts.append(f"<h1>{node.content or escape_html(node.title)}</h1>")
            parts.append(body)
            if footnotes:
                parts.append(footnotes)
            return "\n".join(part for part in parts if part)

        title = node.title or self.options.document_title
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        ]
        if settings.has("author"):
            parts.append(f'<meta name="author" content="{escape_html(settings.get("author") or "")}">')
        parts.append(f"<title>{escape_html(title)}</title>")
        parts.append("</head>")
        parts.append('<body class="article">')

        if node.title and not settings.has("notitle"):
            parts.append('<div id="header">')
            parts.append(f"<h1>{node.content or escape_html(node.title)}</h1>")
            details = self._header_details(node)
            if details:
                parts.append(details)
            parts.append("</div>")

        parts.append('<div id="content">')
        parts.append(body)
        parts.append("</div>")
        if footnotes:
            parts.append(footnotes)
        parts.append("</body>")
        parts.append("</html>")
        return "\n".join(part for part in parts if part)

    @staticmethod
    def _header_details(node: DocumentNode) -> str:
        settings = node.document
        spans = []
        if settings.has("author"):
            spans.append(f'<span id="author" class="author">{escape_html(settings.get("author") or "")}</span>')
        if settings.has("email"):
            email = escape_html(settings.get("email") or "")
            spans.append(f'<span id="email" class="email"><a href="mailto:{email}">{email}</a></span>')
        if settings.has("revnumber"):
            spans.append(f'<span id="revnumber">version {escape_html(settings.get("revnumber") or "")}</span>')
        if settings.has("revdate"):
            spans.append(f'<span id="revdate">{escape_html(settings.get("revdate") or "")}</span>')
        if not spans:
            return ""
        return '<div class="details">\n' + "<br>\n".join(spans) + "\n</div>"

    @staticmethod
    def _footnotes(node: DocumentNode) -> str:
        if not isinstance(node, Document) or not node.footnotes:
            return ""
        lines = ['<div id="footnotes">', "<hr>"]
        for footnote in node.footnotes:
            lines.append(
                f'<div class="footnote" id="_footnotedef_{footnote.index}">\n'
                f'<a href="#_footnoteref_{footnote.index}">{footnote.index}</a>. {footnote.text}\n'
                "</div>"
            )
        lines.append("</div>")
        return "\n".join(lines)

    def visit_section(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a section with its heading (``<h2>`` for level 1) and body."""
        children = self._children(node)
        if node.level == 0:
            return f'<h1{build_id(node)} class="sect0">{node.content}</h1>\n{children}'

        heading_level = min(node.level + 1, 6)
        caption = escape_html(node.caption or "")
        heading = f"<h{heading_level}{build_id(node)}>{caption}{node.content}</h{heading_level}>"
        body = f'<div class="sectionbody">\n{children}\n</div>' if node.level == 1 else children
        return f"<div{build_class(node, (f'sect{node.level}',))}>\n{heading}\n{body}\n</div>"

    def visit_floating_title(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a discrete heading."""
        heading_level = min(node.level + 1, 6)
        attributes = build_id(node) + build_class(node, ("discrete",))
        return f"<h{heading_level}{attributes}>{node.content}</h{heading_level}>"

    # ------------------------------------------------------------------
    # Blocks with semantic counterparts
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a paragraph inside a ``paragraph`` container."""
        return f"{self._block_open(node, 'paragraph')}\n{self._title_div(node)}<p>{node.content}</p>\n</div>"

    def visit_listing(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a listing inside a ``listingblock`` container, without highlighting."""
        language = node.get_attribute("language")
        if node.style == "source" and language:
            lang = escape_html(language)
            pre = f'<pre class="highlight"><code class="language-{lang}" data-lang="{lang}">{node.content}</code></pre>'
        else:
            pre = f"<pre>{node.content}</pre>"
        opening = self._block_open(node, "listingblock", exclude=("language",))
        return f'{opening}\n{self._title_div(node)}<div class="content">\n{pre}\n</div>\n</div>'

    def visit_literal(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a literal block inside a ``literalblock`` container."""
        opening = self._block_open(node, "literalblock")
        return f'{opening}\n{self._title_div(node)}<div class="content">\n<pre>{node.content}</pre>\n</div>\n</div>'

    def visit_quote(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a quote or verse block with its attribution."""
        block_class = "verseblock" if node.style == "verse" else "quoteblock"
        parts = [
            self._block_open(node, block_class, exclude=("attribution", "citetitle")),
            self._title_div(node).rstrip(),
            f"<blockquote>\n{self._children(node)}\n</blockquote>",
        ]

        citation = []
        if node.get_attribute("attribution"):
            citation.append(f"&#8212; {escape_html(node.get_attribute('attribution') or '')}")
        if node.get_attribute("citetitle"):
            citation.append(f"<cite>{escape_html(node.get_attribute('citetitle') or '')}</cite>")
        if citation:
            parts.append('<div class="attribution">\n' + "<br>\n".join(citation) + "\n</div>")

        parts.append("</div>")
        return "\n".join(part for part in parts if part)

    def _list_items(self, node: ListNode) -> str:
        items = []
        for item in node.items:
            lines = ["<li>", f"<p>{item.text}</p>"]
            lines.extend(self._convert_child(child) for child in item.blocks)
            lines.append("</li>")
            items.append("\n".join(lines))
        return "\n".join(items)

    def visit_ulist(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render an unordered list inside a ``ulist`` container."""
        assert isinstance(node, ListNode)
        opening = self._block_open(node, "ulist")
        return f"{opening}\n{self._title_div(node)}<ul>\n{self._list_items(node)}\n</ul>\n</div>"

    def visit_olist(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render an ordered list inside an ``olist`` container."""
        assert isinstance(node, ListNode)
        style = node.style or "arabic"
        start = node.get_attribute("start")
        start_attr = f' start="{escape_html(start)}"' if start else ""
        opening = self._block_open(node, f"olist {style}", exclude=("start",))
        items = self._list_items(node)
        return f'{opening}\n{self._title_div(node)}<ol class="{style}"{start_attr}>\n{items}\n</ol>\n</div>'

    # ------------------------------------------------------------------
    # Blocks rendered only here
    # ------------------------------------------------------------------

    def visit_dlist(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a description list as ``<dl>``."""
        assert isinstance(node, ListNode)
        entries = []
        for item in node.items:
            entries.append(f'<dt class="hdlist1">{item.term or ""}</dt>')
            description = [f"<p>{item.text}</p>"] if item.text else []
            description.extend(self._convert_child(child) for child in item.blocks)
            if description:
                entries.append("<dd>\n" + "\n".join(description) + "\n</dd>")

        opening = self._block_open(node, "dlist")
        return f"{opening}\n{self._title_div(node)}<dl>\n" + "\n".join(entries) + "\n</dl>\n</div>"

    def visit_admonition(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render an admonition as the icon/content table."""
        name = node.get_attribute("name") or (node.style or "note").lower()
        if name.upper() not in ADMONITION_TYPES:
            logger.debug("Unknown admonition type %r", name)
        label = node.get_attribute("textlabel") or name.title()
        body = self._children(node) if node.blocks else node.content

        opening = self._block_open(node, f"admonitionblock {name}", exclude=("name", "textlabel"))
        return (
            f"{opening}\n<table>\n<tr>\n"
            f'<td class="icon">\n<div class="title">{escape_html(label)}</div>\n</td>\n'
            f'<td class="content">\n{self._title_div(node)}{body}\n</td>\n'
            "</tr>\n</table>\n</div>"
        )

    def visit_example(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render an example block, as a ``<details>`` disclosure when collapsible."""
        content = f'<div class="content">\n{self._children(node)}\n</div>'
        if has_option(node, COLLAPSIBLE_OPTION):
            open_marker = " open" if has_option(node, OPEN_OPTION) else ""
            summary = escape_html(node.title) if node.title else DEFAULT_SUMMARY_TEXT
            attributes = build_id(node) + build_class(node) + build_other_attributes(node)
            summary_markup = f'<summary class="title">{summary}</summary>'
            return f"<details{attributes}{open_marker}>\n{summary_markup}\n{content}\n</details>"
        return f"{self._block_open(node, 'exampleblock')}\n{self._title_div(node)}{content}\n</div>"

    def visit_sidebar(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a sidebar block."""
        opening = self._block_open(node, "sidebarblock")
        return f'{opening}\n<div class="content">\n{self._title_div(node)}{self._children(node)}\n</div>\n</div>'

    def visit_open(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render an open block."""
        block_class = "openblock" if node.style in (None, "open") else f"openblock {node.style}"
        opening = self._block_open(node, block_class)
        return f'{opening}\n{self._title_div(node)}<div class="content">\n{self._children(node)}\n</div>\n</div>'

    def visit_image(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a block image, linked when a ``link`` attribute is set."""
        src = escape_html(node.get_attribute("target") or "")
        alt = escape_html(node.get_attribute("alt") or "")
        size = ""
        for name in ("width", "height"):
            value = node.get_attribute(name)
            if value:
                size += f' {name}="{escape_html(value)}"'

        img = f'<img src="{src}" alt="{alt}"{size}>'
        link = node.get_attribute("link")
        if link:
            img = f'<a class="image" href="{escape_html(link)}">{img}</a>'

        parts = [
            self._block_open(node, "imageblock", exclude=("target", "alt", "width", "height", "link")),
            f'<div class="content">\n{img}\n</div>',
            self._title_div(node).rstrip(),
            "</div>",
        ]
        return "\n".join(part for part in parts if part)

    def visit_pass(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Emit passthrough content unchanged."""
        return node.content

    def visit_table(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a table with optional header and footer rows."""
        assert isinstance(node, TableNode)
        rows = list(node.rows)
        header_rows = rows[: node.header_row_count]
        body_rows = rows[node.header_row_count :]
        footer_rows = [body_rows.pop()] if has_option(node, "footer") and body_rows else []

        classes = build_class(node, ("tableblock", "frame-all", "grid-all", "stretch"))
        parts = [f"<table{build_id(node)}{classes}{build_other_attributes(node, exclude=('cols',))}>"]
        if node.title:
            parts.append(f'<caption class="title">{escape_html(node.captioned_title)}</caption>')

        column_count = max((len(row) for row in rows), default=0)
        if column_count:
            width = round(100 / column_count, 4)
            parts.append("<colgroup>")
            parts.extend(f'<col style="width: {width:g}%;">' for _ in range(column_count))
            parts.append("</colgroup>")

        for section, section_rows in (("thead", header_rows), ("tbody", body_rows), ("tfoot", footer_rows)):
            if not section_rows:
                continue
            parts.append(f"<{section}>")
            for row in section_rows:
                parts.append("<tr>")
                for cell in row:
                    if section == "thead":
                        parts.append(f'<th class="tableblock halign-left valign-top">{cell}</th>')
                    else:
                        cell_markup = f'<p class="tableblock">{cell}</p>'
                        parts.append(f'<td class="tableblock halign-left valign-top">{cell_markup}</td>')
                parts.append("</tr>")
            parts.append(f"</{section}>")

        parts.append("</table>")
        return "\n".join(parts)

    def visit_thematic_break(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a thematic break."""
        return "<hr>"

    def visit_page_break(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Render a page break."""
        return '<div style="page-break-after: always;"></div>'


__all__ = ["GenericHtmlRenderer", "TRANSFORM_DOCUMENT", "TRANSFORM_EMBEDDED"]
