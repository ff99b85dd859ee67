#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/ast/nodes.py
"""Immutable document tree produced by the AsciiDoc parser.

The tree is made of frozen dataclasses. Sequences are stored as tuples and
attribute maps as read-only ``MappingProxyType`` views, so a converted tree is
guaranteed to come out exactly as it went in. Ownership is strictly
tree-shaped: a parent owns its blocks, a list owns its items.

Every node carries a ``node_type`` tag drawn from the closed ``NodeType``
enumeration; the converter dispatches on that tag rather than on the Python
class.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from semadoc.constants import HIGHLIGHT_THEME_ATTRIBUTE, OPTION_SUFFIX


class NodeType(str, Enum):
    """Closed set of node type tags."""

    DOCUMENT = "document"
    SECTION = "section"
    FLOATING_TITLE = "floating_title"
    PARAGRAPH = "paragraph"
    LISTING = "listing"
    LITERAL = "literal"
    QUOTE = "quote"
    ULIST = "ulist"
    OLIST = "olist"
    DLIST = "dlist"
    ADMONITION = "admonition"
    EXAMPLE = "example"
    SIDEBAR = "sidebar"
    OPEN = "open"
    IMAGE = "image"
    PASS = "pass"
    TABLE = "table"
    THEMATIC_BREAK = "thematic_break"
    PAGE_BREAK = "page_break"


def _freeze_mapping(value: Mapping[str, Any] | None) -> Mapping[str, str]:
    return MappingProxyType({str(k): "" if v is None else str(v) for k, v in (value or {}).items()})


@dataclass(frozen=True)
class DocumentSettings:
    """Read-only document-level attributes shared by every node of a tree.

    Parameters
    ----------
    attributes : Mapping[str, str], default = empty mapping
        Resolved document attributes (``:name: value`` entries plus presets)

    """

    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the attribute mapping."""
        object.__setattr__(self, "attributes", _freeze_mapping(self.attributes))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return a document attribute or ``default`` when unset."""
        return self.attributes.get(name, default)

    def has(self, name: str) -> bool:
        """Return whether a document attribute is set."""
        return name in self.attributes

    @property
    def theme(self) -> Optional[str]:
        """Highlighting theme requested by the document, if any."""
        return self.attributes.get(HIGHLIGHT_THEME_ATTRIBUTE) or None

    @property
    def title(self) -> Optional[str]:
        """Document title (the level-0 heading), if any."""
        return self.attributes.get("doctitle") or None


EMPTY_SETTINGS = DocumentSettings()


@dataclass(frozen=True)
class DocumentNode:
    """A block of parsed document content.

    Parameters
    ----------
    node_type : NodeType
        Type tag used for dispatch
    id : str or None, default = None
        Unique element id
    roles : tuple of str, default = ()
        Authoring roles, rendered as CSS classes
    title : str or None, default = None
        Block title (plain text, escaped at render time)
    caption : str or None, default = None
        Caption prefix of the title (e.g. ``"Example 1. "``)
    attributes : Mapping[str, str], default = empty mapping
        Block attributes, including ``<name>-option`` markers
    content : str, default = ""
        Pre-escaped (HTML-safe) content
    blocks : tuple of DocumentNode, default = ()
        Child blocks
    level : int, default = 0
        Section or heading depth
    document : DocumentSettings, default = EMPTY_SETTINGS
        Settings of the owning document

    """

    node_type: NodeType
    id: Optional[str] = None
    roles: tuple[str, ...] = ()
    title: Optional[str] = None
    caption: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict)
    content: str = ""
    blocks: tuple[DocumentNode, ...] = ()
    level: int = 0
    document: DocumentSettings = field(default=EMPTY_SETTINGS, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and freeze the attribute mapping."""
        object.__setattr__(self, "roles", tuple(self.roles))
        object.__setattr__(self, "blocks", tuple(self.blocks))
        object.__setattr__(self, "attributes", _freeze_mapping(self.attributes))

    @property
    def style(self) -> Optional[str]:
        """Block style (first positional attribute), if any."""
        return self.attributes.get("style") or None

    @property
    def has_title(self) -> bool:
        """Return whether the block has a non-empty title."""
        return bool(self.title)

    @property
    def captioned_title(self) -> str:
        """Title prefixed with its caption, or an empty string."""
        if not self.title:
            return ""
        return f"{self.caption or ''}{self.title}"

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return a block attribute or ``default`` when it is absent."""
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Return whether the block declares ``name``."""
        return name in self.attributes

    def option_names(self) -> tuple[str, ...]:
        """Option names declared by ``<name>-option`` attribute keys."""
        return tuple(key[: -len(OPTION_SUFFIX)] for key in self.attributes if key.endswith(OPTION_SUFFIX))

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this node and every descendant block, depth first."""
        yield self
        for child in self.blocks:
            yield from child.walk()


@dataclass(frozen=True)
class ListItem:
    """An item of a list node.

    Parameters
    ----------
    text : str, default = ""
        HTML-safe inline text of the item
    blocks : tuple of DocumentNode, default = ()
        Nested blocks (attached blocks and sub-lists)
    term : str or None, default = None
        Term of a description list entry

    """

    text: str = ""
    blocks: tuple[DocumentNode, ...] = ()
    term: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize blocks to a tuple."""
        object.__setattr__(self, "blocks", tuple(self.blocks))

    @property
    def has_blocks(self) -> bool:
        """Return whether the item owns nested blocks."""
        return bool(self.blocks)


@dataclass(frozen=True)
class ListNode(DocumentNode):
    """Ordered, unordered or description list.

    The list appearance (numbering style or the ``menu`` variant) is carried
    by the ``style`` attribute.
    """

    items: tuple[ListItem, ...] = ()

    def __post_init__(self) -> None:
        """Normalize items to a tuple."""
        super().__post_init__()
        object.__setattr__(self, "items", tuple(self.items))

    def walk(self) -> Iterator[DocumentNode]:
        """Yield this list, its blocks and the blocks nested in its items."""
        yield from super().walk()
        for item in self.items:
            for child in item.blocks:
                yield from child.walk()


@dataclass(frozen=True)
class TableNode(DocumentNode):
    """Table with plain cell content.

    Parameters
    ----------
    rows : tuple of tuple of str, default = ()
        HTML-safe cell content, row by row
    header_row_count : int, default = 0
        Number of leading rows that form the table header

    """

    rows: tuple[tuple[str, ...], ...] = ()
    header_row_count: int = 0

    def __post_init__(self) -> None:
        """Normalize rows to nested tuples."""
        super().__post_init__()
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))


@dataclass(frozen=True)
class Footnote:
    """A footnote collected from inline text.

    Parameters
    ----------
    index : int
        1-based footnote number
    text : str
        HTML-safe footnote text
    id : str or None, default = None
        Author-assigned id (``footnote:id[text]``), if any

    """

    index: int
    text: str
    id: Optional[str] = None


@dataclass(frozen=True)
class Document(DocumentNode):
    """Root node of a parsed document.

    The document title lives in ``title`` (and in the ``doctitle`` attribute);
    footnotes collected from the whole text are listed in ``footnotes``.
    """

    node_type: NodeType = NodeType.DOCUMENT
    footnotes: tuple[Footnote, ...] = ()

    def __post_init__(self) -> None:
        """Normalize footnotes to a tuple."""
        super().__post_init__()
        object.__setattr__(self, "footnotes", tuple(self.footnotes))

    @property
    def settings(self) -> DocumentSettings:
        """Document-level settings shared with every node."""
        return self.document
