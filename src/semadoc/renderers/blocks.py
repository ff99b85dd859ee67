#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/blocks.py
"""Semantic renderers for paragraph, listing, literal and quote blocks.

Each renderer takes a node and the ``SemanticConverter`` that dispatched it
and returns an HTML fragment. They share one structure:

1. id, class and generic attribute fragments, with the renderer's own
   implicit classes and the keys it emits itself excluded;
2. the title markup;
3. the type-specific element;
4. ``wrap_block``, which adds a ``<details>`` disclosure for collapsible
   blocks, puts the title right before the element for titled blocks, and
   adds nothing otherwise.

Unlike the generic renderer, no ``<div class="paragraph">`` style wrapper
container is ever emitted.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from semadoc.ast import DocumentNode
from semadoc.constants import (
    COLLAPSIBLE_OPTION,
    DEFAULT_HIGHLIGHT_THEME,
    DEFAULT_LISTING_LANGUAGE,
    DEFAULT_SUMMARY_TEXT,
    HIGHLIGHT_CLASS,
    OPEN_OPTION,
    PLAINTEXT_LANGUAGE,
    SOURCE_STYLE,
)
from semadoc.renderers.attributes import build_block_attributes, build_title, has_option
from semadoc.utils.html_utils import escape_html

if TYPE_CHECKING:
    from semadoc.renderers.dispatcher import SemanticConverter

logger = logging.getLogger(__name__)


def wrap_block(node: DocumentNode, inner: str, title_markup: str) -> str:
    """Apply the collapsible/title wrapping policy to rendered block HTML.

    Parameters
    ----------
    node : DocumentNode
        Rendered node (supplies options and title)
    inner : str
        Type-specific HTML of the block
    title_markup : str
        Result of ``build_title`` for the node

    Returns
    -------
    str
        ``<details>`` disclosure when the ``collapsible`` option is set (with
        ``open`` when that option is set too), else the title markup followed
        by ``inner``, else ``inner`` alone

    """
    if has_option(node, COLLAPSIBLE_OPTION):
        open_marker = " open" if has_option(node, OPEN_OPTION) else ""
        summary = escape_html(node.captioned_title) if node.title else DEFAULT_SUMMARY_TEXT
        return f"<details{open_marker}><summary>{summary}</summary>{inner}</details>"
    if title_markup:
        return f"{title_markup}{inner}"
    return inner


def resolve_theme(node: DocumentNode, converter: SemanticConverter) -> str:
    """Return the highlight theme: document attribute, then options, then the default."""
    return node.document.theme or converter.options.highlight_theme or DEFAULT_HIGHLIGHT_THEME


def paragraph(node: DocumentNode, converter: SemanticConverter) -> str:
    """Render a paragraph as a bare ``<p>``."""
    attributes = build_block_attributes(node)
    title = build_title(node, converter.options.title_tag)
    return wrap_block(node, f"<p{attributes}>{node.content}</p>", title)


def listing(node: DocumentNode, converter: SemanticConverter) -> str:
    """Render a listing as ``<pre><code class="language-...">``.

    The code is highlighted with the shared highlighter unless
    ``syntax_highlighting`` is disabled, in which case the escaped content
    is inserted unchanged. A language the highlighter does not know is
    highlighted as plain text but keeps its ``language-`` class.
    """
    language = node.get_attribute("language") or DEFAULT_LISTING_LANGUAGE
    extra_classes = (HIGHLIGHT_CLASS,) if node.style == SOURCE_STYLE else ()
    attributes = build_block_attributes(node, extra_classes, exclude=("style", "language"))
    title = build_title(node, converter.options.title_tag)

    if converter.options.syntax_highlighting:
        highlighter = converter.highlighter
        if not highlighter.supports(language):
            logger.debug("No lexer for %r, highlighting as %s", language, PLAINTEXT_LANGUAGE)
            lexer_language = PLAINTEXT_LANGUAGE
        else:
            lexer_language = language
        code = highlighter.highlight(node.content, lexer_language, resolve_theme(node, converter))
    else:
        code = node.content

    inner = f'<pre{attributes}><code class="language-{escape_html(language)}">{code}</code></pre>'
    return wrap_block(node, inner, title)


def literal(node: DocumentNode, converter: SemanticConverter) -> str:
    """Render a literal block as a bare ``<pre>`` with its pre-escaped content."""
    attributes = build_block_attributes(node, exclude=("style",))
    title = build_title(node, converter.options.title_tag)
    return wrap_block(node, f"<pre{attributes}>{node.content}</pre>", title)


def quote(node: DocumentNode, converter: SemanticConverter) -> str:
    """Render a quote (or verse) as ``<blockquote>`` with an optional attribution footer."""
    attributes = build_block_attributes(node, exclude=("style", "attribution", "citetitle"))
    title = build_title(node, converter.options.title_tag)
    children = "".join(converter.convert(child) for child in node.blocks)

    citation = [
        escape_html(value)
        for value in (node.get_attribute("attribution"), node.get_attribute("citetitle"))
        if value
    ]
    footer = f"<footer>— <cite>{', '.join(citation)}</cite></footer>" if citation else ""

    return wrap_block(node, f"<blockquote{attributes}>{children}{footer}</blockquote>", title)


__all__ = ["listing", "literal", "paragraph", "quote", "resolve_theme", "wrap_block"]
