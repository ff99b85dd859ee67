#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/attributes.py
"""Attribute fragments shared by the block renderers.

Every function here is pure: it reads a node and returns a string (or a tuple
of option names) without touching the node. Fragments that render to
something start with a space, so they can be concatenated directly after a
tag name::

    f"<p{build_id(node)}{build_class(node)}{build_other_attributes(node)}>"

Attribute values and titles are HTML-escaped. Ids and class tokens are
emitted as-is; the parser only produces valid identifiers for them.

"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from semadoc.ast import DocumentNode
from semadoc.constants import DEFAULT_EXCLUDED_ATTRIBUTES, DEFAULT_TITLE_TAG, OPTION_SUFFIX
from semadoc.utils.html_utils import escape_html


def build_id(node: DocumentNode) -> str:
    """Return `` id="..."`` for a node with a non-empty id, else ``""``."""
    if not node.id:
        return ""
    return f' id="{node.id}"'


def build_class(node: DocumentNode, extra_classes: Iterable[str] = ()) -> str:
    """Return the ``class`` fragment for the node roles plus ``extra_classes``.

    Parameters
    ----------
    node : DocumentNode
        Node whose roles come first
    extra_classes : iterable of str, default = ()
        Renderer-specific implicit classes

    Returns
    -------
    str
        `` class="r1 r2"`` with duplicates removed (first occurrence wins),
        or ``""`` when there is no class at all

    """
    classes = [name for name in dict.fromkeys((*node.roles, *extra_classes)) if name]
    if not classes:
        return ""
    return f' class="{" ".join(classes)}"'


def build_other_attributes(
    node: DocumentNode,
    extra_attributes: Optional[Mapping[str, object]] = None,
    exclude: Iterable[str] = (),
) -> str:
    """Return every generic attribute of the node as HTML attributes.

    Keys handled by dedicated logic never appear here: ``id``, ``role``,
    ``style``, ``title``, the positional marker, anything in ``exclude`` and
    any ``<name>-option`` marker. Empty values are skipped entirely.

    Parameters
    ----------
    node : DocumentNode
        Source of the attributes
    extra_attributes : Mapping or None, default = None
        Additional attributes; they override node attributes of the same name
    exclude : iterable of str, default = ()
        Keys the calling renderer emits itself

    Returns
    -------
    str
        Concatenated `` key="value"`` pairs

    """
    excluded = DEFAULT_EXCLUDED_ATTRIBUTES.union(exclude)
    merged: dict[str, object] = dict(node.attributes)
    if extra_attributes:
        merged.update(extra_attributes)

    parts = []
    for key, value in merged.items():
        if key in excluded or key.endswith(OPTION_SUFFIX):
            continue
        if not value:
            continue
        parts.append(f' {key}="{escape_html(str(value))}"')
    return "".join(parts)


def get_options(node: DocumentNode, extra_options: Iterable[str] = ()) -> tuple[str, ...]:
    """Return the option names set on the node, followed by ``extra_options``."""
    return tuple(dict.fromkeys((*node.option_names(), *extra_options)))


def has_option(node: DocumentNode, name: str) -> bool:
    """Return whether the node declares option ``name`` (whatever its value)."""
    return f"{name}{OPTION_SUFFIX}" in node.attributes


def build_title(node: DocumentNode, tag: str = DEFAULT_TITLE_TAG) -> str:
    """Return ``<tag>`` + escaped captioned title + ``</tag>``, or ``""`` without a title."""
    if not node.title:
        return ""
    return f"<{tag}>{escape_html(node.captioned_title)}</{tag}>"


def build_block_attributes(
    node: DocumentNode,
    extra_classes: Iterable[str] = (),
    extra_attributes: Optional[Mapping[str, object]] = None,
    exclude: Iterable[str] = (),
) -> str:
    """Return the id, class and generic attribute fragments of a block, in that order."""
    return (
        build_id(node)
        + build_class(node, extra_classes)
        + build_other_attributes(node, extra_attributes=extra_attributes, exclude=exclude)
    )


__all__ = [
    "build_block_attributes",
    "build_class",
    "build_id",
    "build_other_attributes",
    "build_title",
    "get_options",
    "has_option",
]
