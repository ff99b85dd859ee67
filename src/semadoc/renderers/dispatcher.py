#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/dispatcher.py
"""Node dispatch for semantic HTML conversion.

``SemanticConverter`` maps each node type to a semantic renderer through a
closed, read-only table. Node types without a semantic renderer are handed
to the generic renderer, whose output is returned unchanged; children of
those nodes come back through ``convert`` so they still get semantic
rendering.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from semadoc.ast import Document, DocumentNode, NodeType
from semadoc.highlight import Highlighter, get_highlighter
from semadoc.options.html import HtmlConverterOptions
from semadoc.renderers.base import BaseConverter
from semadoc.renderers.blocks import listing, literal, paragraph, quote
from semadoc.renderers.fallback import TRANSFORM_DOCUMENT, TRANSFORM_EMBEDDED, GenericHtmlRenderer
from semadoc.renderers.lists import olist, ulist

logger = logging.getLogger(__name__)

Renderer = Callable[[Any, "SemanticConverter"], str]

SEMANTIC_RENDERERS: Mapping[NodeType, Renderer] = MappingProxyType(
    {
        NodeType.PARAGRAPH: paragraph,
        NodeType.LISTING: listing,
        NodeType.LITERAL: literal,
        NodeType.QUOTE: quote,
        NodeType.ULIST: ulist,
        NodeType.OLIST: olist,
    }
)


class SemanticConverter(BaseConverter):
    """Convert a document tree to semantic HTML.

    Parameters
    ----------
    options : HtmlConverterOptions or None, default = None
        Conversion options
    fallback : GenericHtmlRenderer or None, default = None
        Renderer for node types without a semantic renderer. By default a
        ``GenericHtmlRenderer`` whose child blocks are routed back through
        this converter.
    highlighter : Highlighter or None, default = None
        Highlighter for listings; the shared one is used when omitted

    Examples
    --------
        >>> from semadoc.ast import ListItem, ListNode, NodeType
        >>> node = ListNode(NodeType.ULIST, items=(ListItem("a"), ListItem("b")))
        >>> SemanticConverter().convert(node)
        '<ul><li>a</li><li>b</li></ul>'

    """

    def __init__(
        self,
        options: HtmlConverterOptions | None = None,
        *,
        fallback: Optional[GenericHtmlRenderer] = None,
        highlighter: Optional[Highlighter] = None,
    ):
        """Initialize the converter with options and collaborators."""
        BaseConverter._validate_options_type(options, HtmlConverterOptions, "html")
        options = options or HtmlConverterOptions()
        super().__init__(options)
        self.options: HtmlConverterOptions = options
        self.fallback = fallback or GenericHtmlRenderer(options, child_converter=self.convert)
        self._highlighter = highlighter

    @property
    def highlighter(self) -> Highlighter:
        """Highlighter used for listings (the shared one unless injected)."""
        if self._highlighter is None:
            self._highlighter = get_highlighter()
        return self._highlighter

    def convert(self, node: DocumentNode, transform: Optional[str] = None) -> str:
        """Convert one node (and its descendants) to HTML.

        Parameters
        ----------
        node : DocumentNode
            Node to convert; it is never modified
        transform : str, optional
            Hint passed to the fallback renderer (``"document"`` or
            ``"embedded"`` for the root document)

        Returns
        -------
        str
            HTML fragment

        """
        renderer = SEMANTIC_RENDERERS.get(node.node_type)
        if renderer is None:
            logger.debug("No semantic renderer for %s, using the generic renderer", node.node_type.value)
            return self.fallback.convert(node, transform)
        return renderer(node, self)

    def convert_document(self, document: Document) -> str:
        """Convert a whole document, as a standalone page or an embeddable fragment."""
        transform = TRANSFORM_DOCUMENT if self.options.standalone else TRANSFORM_EMBEDDED
        return self.convert(document, transform)


__all__ = ["SEMANTIC_RENDERERS", "SemanticConverter", "TRANSFORM_DOCUMENT", "TRANSFORM_EMBEDDED"]
