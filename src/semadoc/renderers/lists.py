#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/lists.py
"""Semantic renderers for ordered and unordered lists.

``olist``/``ulist`` and ``render_list_item`` are mutually recursive: an item
renders a nested list of its parent's kind directly through the matching
list renderer, and every other child block through the converter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from semadoc.ast import ListItem, ListNode, NodeType
from semadoc.constants import (
    DEFAULT_ORDERED_LIST_STYLE,
    FALLBACK_ORDERED_LIST_TYPE,
    LIST_ITEM_WRAP_THRESHOLD,
    MENU_STYLE,
    ORDERED_LIST_TYPE_MAP,
)
from semadoc.renderers.attributes import build_block_attributes, build_title
from semadoc.renderers.blocks import wrap_block
from semadoc.utils.html_utils import contains_markup, escape_html

if TYPE_CHECKING:
    from semadoc.renderers.dispatcher import SemanticConverter


def ordered_list_type(style: str | None) -> str | None:
    """Map a numbering style to the ``type`` attribute value (None to omit it).

    Examples
    --------
        >>> ordered_list_type("upperroman")
        'I'
        >>> ordered_list_type("arabic") is None
        True
        >>> ordered_list_type("decimal")
        '1'

    """
    return ORDERED_LIST_TYPE_MAP.get(style or DEFAULT_ORDERED_LIST_STYLE, FALLBACK_ORDERED_LIST_TYPE)


def olist(node: ListNode, converter: SemanticConverter) -> str:
    """Render an ordered list as ``<ol>`` with ``start`` and ``type`` when needed."""
    start = node.get_attribute("start")
    start_attr = f' start="{escape_html(start)}"' if start and start != "1" else ""
    list_type = ordered_list_type(node.style)
    type_attr = f' type="{list_type}"' if list_type else ""

    attributes = build_block_attributes(node, exclude=("style", "start"))
    title = build_title(node, converter.options.title_tag)
    items = "".join(render_list_item(item, node, converter) for item in node.items)
    return wrap_block(node, f"<ol{attributes}{start_attr}{type_attr}>{items}</ol>", title)


def ulist(node: ListNode, converter: SemanticConverter) -> str:
    """Render an unordered list as ``<ul>``, or ``<menu>`` for the ``menu`` style."""
    tag = "menu" if node.style == MENU_STYLE else "ul"
    attributes = build_block_attributes(node, exclude=("style",))
    title = build_title(node, converter.options.title_tag)
    items = "".join(render_list_item(item, node, converter) for item in node.items)
    return wrap_block(node, f"<{tag}{attributes}>{items}</{tag}>", title)


LIST_RENDERERS: dict[NodeType, Callable[[ListNode, "SemanticConverter"], str]] = {
    NodeType.OLIST: olist,
    NodeType.ULIST: ulist,
}


def render_list_item(item: ListItem, parent: ListNode, converter: SemanticConverter) -> str:
    """Render one list item.

    Parameters
    ----------
    item : ListItem
        Item to render
    parent : ListNode
        List that owns the item
    converter : SemanticConverter
        Converter used for nested blocks

    Returns
    -------
    str
        ``<li>`` element. Without nested blocks, text longer than
        ``LIST_ITEM_WRAP_THRESHOLD`` characters or containing markup is
        wrapped in ``<p>``.

    """
    if item.has_blocks:
        children = []
        for child in item.blocks:
            if child.node_type == parent.node_type and isinstance(child, ListNode):
                children.append(LIST_RENDERERS[child.node_type](child, converter))
            else:
                children.append(converter.convert(child))
        return f"<li>{item.text}{''.join(children)}</li>"

    if len(item.text) > LIST_ITEM_WRAP_THRESHOLD or contains_markup(item.text):
        return f"<li><p>{item.text}</p></li>"
    return f"<li>{item.text}</li>"


__all__ = ["LIST_RENDERERS", "olist", "ordered_list_type", "render_list_item", "ulist"]
