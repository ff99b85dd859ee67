#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/ast/__init__.py
"""Document tree for semadoc.

Examples
--------
Build a small tree by hand:

    >>> from semadoc.ast import DocumentNode, ListItem, ListNode, NodeType
    >>> para = DocumentNode(NodeType.PARAGRAPH, content="Hello")
    >>> ulist = ListNode(NodeType.ULIST, items=(ListItem("a"), ListItem("b")))

"""

from semadoc.ast.nodes import (
    EMPTY_SETTINGS,
    Document,
    Footnote,
    DocumentNode,
    DocumentSettings,
    ListItem,
    ListNode,
    NodeType,
    TableNode,
)

__all__ = [
    "EMPTY_SETTINGS",
    "Document",
    "Footnote",
    "DocumentNode",
    "DocumentSettings",
    "ListItem",
    "ListNode",
    "NodeType",
    "TableNode",
]
