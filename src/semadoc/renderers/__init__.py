#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/__init__.py
"""HTML renderers for the semadoc document tree.

``SemanticConverter`` is the entry point: it dispatches paragraph, listing,
literal, quote and list nodes to the semantic renderers of this package and
everything else to ``GenericHtmlRenderer``.
"""

from semadoc.renderers.attributes import (
    build_block_attributes,
    build_class,
    build_id,
    build_other_attributes,
    build_title,
    get_options,
    has_option,
)
from semadoc.renderers.base import BaseConverter
from semadoc.renderers.blocks import listing, literal, paragraph, quote, wrap_block
from semadoc.renderers.dispatcher import SEMANTIC_RENDERERS, SemanticConverter
from semadoc.renderers.fallback import GenericHtmlRenderer
from semadoc.renderers.lists import olist, render_list_item, ulist

__all__ = [
    "BaseConverter",
    "GenericHtmlRenderer",
    "SEMANTIC_RENDERERS",
    "SemanticConverter",
    "build_block_attributes",
    "build_class",
    "build_id",
    "build_other_attributes",
    "build_title",
    "get_options",
    "has_option",
    "listing",
    "literal",
    "olist",
    "paragraph",
    "quote",
    "render_list_item",
    "ulist",
    "wrap_block",
]
