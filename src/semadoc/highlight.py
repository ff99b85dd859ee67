#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/highlight.py
"""Syntax highlighting backed by Pygments.

The highlighter is a process-wide resource. ``initialize_highlighter`` builds
it once (lexer alias table plus one inline-styled ``HtmlFormatter`` per theme)
and nothing mutates it afterwards, so concurrent conversions can share it
without locking. ``get_highlighter`` performs the initialization with default
settings on first use.

Output is a sequence of ``<span style="...">`` runs without any ``<pre>`` or
``<div>`` wrapper, ready to be placed inside the listing's ``<code>`` element.

"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from semadoc.constants import DEFAULT_HIGHLIGHT_THEME, DEPS_HIGHLIGHT, PLAINTEXT_LANGUAGE
from semadoc.utils.decorators import requires_dependencies
from semadoc.utils.html_utils import unescape_html

logger = logging.getLogger(__name__)

# Alias names that map to the plain-text lexer
_PLAINTEXT_ALIASES = frozenset({PLAINTEXT_LANGUAGE, "text", "plain", "txt"})


@dataclass(frozen=True)
class Highlighter:
    """Immutable highlighting resource.

    Parameters
    ----------
    languages : frozenset of str
        Lower-cased language aliases that have a lexer
    formatters : Mapping[str, Any]
        Theme name to ``pygments.formatters.HtmlFormatter``
    default_theme : str
        Theme used when none (or an unknown one) is requested

    """

    languages: frozenset[str]
    formatters: Mapping[str, Any] = field(repr=False)
    default_theme: str = DEFAULT_HIGHLIGHT_THEME

    def supports(self, language: Optional[str]) -> bool:
        """Return whether ``language`` has a lexer."""
        return bool(language) and language.lower() in self.languages  # type: ignore[union-attr]

    @property
    def themes(self) -> tuple[str, ...]:
        """Names of the themes available to ``highlight``."""
        return tuple(sorted(self.formatters))

    def highlight(self, code: str, language: str, theme: Optional[str] = None) -> str:
        """Highlight a block of code.

        Parameters
        ----------
        code : str
            Source code; HTML character references are decoded first since
            listing content arrives pre-escaped
        language : str
            Language alias; unsupported names are highlighted as plain text
        theme : str, optional
            Pygments style name; unknown names use ``default_theme``

        Returns
        -------
        str
            Highlighted HTML runs

        """
        from pygments import highlight as pygments_highlight
        from pygments.lexers import get_lexer_by_name
        from pygments.lexers.special import TextLexer

        lang = (language or PLAINTEXT_LANGUAGE).lower()
        lexer_options = {"stripnl": False, "ensurenl": False}
        if lang in _PLAINTEXT_ALIASES or lang not in self.languages:
            lexer = TextLexer(**lexer_options)
        else:
            lexer = get_lexer_by_name(lang, **lexer_options)

        formatter = self.formatters.get(theme or self.default_theme)
        if formatter is None:
            logger.debug("Unknown highlight theme %r, using %r", theme, self.default_theme)
            formatter = self.formatters[self.default_theme]

        highlighted = pygments_highlight(unescape_html(code), lexer, formatter)
        # HtmlFormatter always terminates the last line
        if highlighted.endswith("\n") and not code.endswith("\n"):
            highlighted = highlighted[:-1]
        return highlighted


_lock = threading.Lock()
_highlighter: Optional[Highlighter] = None


def _build_formatters(themes: Iterable[str]) -> dict[str, Any]:
    from pygments.formatters import HtmlFormatter
    from pygments.util import ClassNotFound

    formatters: dict[str, Any] = {}
    for theme in themes:
        try:
            formatters[theme] = HtmlFormatter(style=theme, nowrap=True, noclasses=True)
        except ClassNotFound:
            logger.warning("Pygments style %r is not installed; skipping", theme)
    return formatters


def _collect_languages() -> frozenset[str]:
    from pygments.lexers import get_all_lexers

    aliases = {alias.lower() for _, names, _, _ in get_all_lexers() for alias in names}
    return frozenset(aliases | _PLAINTEXT_ALIASES)


@requires_dependencies("highlight", DEPS_HIGHLIGHT)
def initialize_highlighter(
    themes: Optional[Iterable[str]] = None,
    default_theme: str = DEFAULT_HIGHLIGHT_THEME,
) -> Highlighter:
    """Build the process-wide highlighter, once.

    Later calls return the existing instance unchanged.

    Parameters
    ----------
    themes : iterable of str, optional
        Pygments styles to prepare; defaults to every installed style
    default_theme : str, default = DEFAULT_HIGHLIGHT_THEME
        Theme used when none or an unknown one is requested

    Returns
    -------
    Highlighter
        The shared highlighter

    """
    global _highlighter

    with _lock:
        if _highlighter is not None:
            return _highlighter

        from pygments.styles import get_all_styles

        requested = list(themes) if themes is not None else sorted(get_all_styles())
        if default_theme not in requested:
            requested.append(default_theme)

        formatters = _build_formatters(requested)
        if default_theme not in formatters:
            fallback = "default"
            logger.warning("Default highlight theme %r unavailable, using %r", default_theme, fallback)
            formatters.update(_build_formatters([fallback]))
            default_theme = fallback

        _highlighter = Highlighter(
            languages=_collect_languages(),
            formatters=MappingProxyType(formatters),
            default_theme=default_theme,
        )
        logger.debug(
            "Highlighter initialized with %d languages and %d themes", len(_highlighter.languages), len(formatters)
        )
        return _highlighter


def get_highlighter() -> Highlighter:
    """Return the shared highlighter, initializing it with defaults if needed."""
    if _highlighter is not None:
        return _highlighter
    return initialize_highlighter()


def highlight_code(code: str, language: str, theme: Optional[str] = None) -> str:
    """Highlight ``code`` with the shared highlighter."""
    return get_highlighter().highlight(code, language, theme)


__all__ = ["Highlighter", "initialize_highlighter", "get_highlighter", "highlight_code"]
