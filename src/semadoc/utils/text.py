#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/utils/text.py
"""Text utilities: indentation removal and id generation."""

from __future__ import annotations

import re
import unicodedata
from typing import Set


def _is_blank(line: str) -> bool:
    return not line.strip()


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def dedent(text: str) -> str:
    """Remove the indentation shared by every non-blank line.

    The pass normalizes CRLF and CR terminators to LF, drops leading and
    trailing blank lines, computes the shortest leading-whitespace run over the
    non-blank lines and strips that many characters from each line that
    carries it. Whitespace-only lines shorter than the common indent are left
    untouched.

    Applying ``dedent`` twice gives the same result as applying it once.

    Parameters
    ----------
    text : str
        Multi-line text

    Returns
    -------
    str
        Dedented text without leading or trailing blank lines

    Examples
    --------
        >>> dedent("\\n    * a\\n    * b\\n  ")
        '* a\\n* b'

    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    while lines and _is_blank(lines[0]):
        lines.pop(0)
    while lines and _is_blank(lines[-1]):
        lines.pop()

    if not lines:
        return ""

    indents = [_indent(line) for line in lines if not _is_blank(line)]
    min_indent = min(indents) if indents else 0
    if min_indent == 0:
        return "\n".join(lines)

    dedented = []
    for line in lines:
        if _indent(line) >= min_indent:
            dedented.append(line[min_indent:])
        else:
            dedented.append(line)
    return "\n".join(dedented)


def slugify(
    text: str,
    *,
    seen_slugs: Set[str] | None = None,
    prefix: str = "_",
    separator: str = "_",
) -> str:
    """Create an element id from heading text, AsciiDoc style.

    The text is accent-folded, lowercased, stripped of anything that is not a
    word character, hyphen or separator, and prefixed. Collisions within
    ``seen_slugs`` get ``_2``, ``_3`` ... suffixes.

    Parameters
    ----------
    text : str
        Heading text (plain, markup already removed)
    seen_slugs : Set[str] or None, default = None
        Ids already used in the document; updated in place
    prefix : str, default = "_"
        Prefix of every generated id
    separator : str, default = "_"
        Replacement for whitespace runs

    Returns
    -------
    str
        Generated id

    Examples
    --------
        >>> slugify("Getting Started")
        '_getting_started'
        >>> seen = {"_intro"}
        >>> slugify("Intro", seen_slugs=seen)
        '_intro_2'

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = normalized.lower()
    slug = re.sub(r"&[a-z0-9#]+;", "", slug)
    slug = re.sub(r"[^\w\s\-.]", "", slug)
    slug = re.sub(r"[\s.]+", separator, slug.strip())
    slug = re.sub(rf"{re.escape(separator)}+", separator, slug)
    slug = slug.strip(separator)
    slug = f"{prefix}{slug or 'section'}"

    if seen_slugs is not None:
        if slug not in seen_slugs:
            seen_slugs.add(slug)
            return slug

        counter = 2
        while f"{slug}{separator}{counter}" in seen_slugs:
            counter += 1

        unique_slug = f"{slug}{separator}{counter}"
        seen_slugs.add(unique_slug)
        return unique_slug

    return slug


def strip_tags(html_text: str) -> str:
    """Remove tags from an inline HTML fragment."""
    return re.sub(r"<[^>]+>", "", html_text)


__all__ = ["dedent", "slugify", "strip_tags"]
