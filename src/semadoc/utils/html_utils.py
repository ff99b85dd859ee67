"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from html import unescape as _html_unescape

from semadoc.constants import MARKUP_CHARACTER


def escape_html(text: str, *, enabled: bool = True, quote: bool = True) -> str:
    """Escape ``& < >`` and, when ``quote`` is set, ``" '``."""
    if not enabled:
        return text
    return _html_escape(text, quote=quote)


def unescape_html(text: str) -> str:
    """Reverse ``escape_html`` (and any other character references)."""
    return _html_unescape(text)


def contains_markup(text: str) -> bool:
    """Return whether ``text`` carries HTML tags."""
    return MARKUP_CHARACTER in text


__all__ = ["escape_html", "unescape_html", "contains_markup"]
