#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/parsers/inline.py
"""Inline substitutions for AsciiDoc text.

``InlineParser`` turns the raw text of a paragraph, list item or table cell
into an HTML-safe string: special characters are escaped, and quoted text,
passthroughs, links, cross references, images, footnotes and attribute
references are replaced by their HTML form.

Backslash escapes are handled with placeholders: escaped characters are
swapped out before scanning and restored (escaped) once the output is
assembled, so they never trigger a substitution.

"""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath
from typing import Callable, Mapping, Optional

from semadoc.ast import Footnote
from semadoc.options.asciidoc import AsciiDocParserOptions
from semadoc.utils.html_utils import escape_html

logger = logging.getLogger(__name__)

# Attributes every document can reference without declaring them
INTRINSIC_ATTRIBUTES = {
    "empty": "",
    "blank": "",
    "sp": " ",
    "nbsp": "&#160;",
    "zwsp": "&#8203;",
    "wj": "&#8288;",
    "apos": "&#39;",
    "quot": "&#34;",
    "lsquo": "&#8216;",
    "rsquo": "&#8217;",
    "ldquo": "&#8220;",
    "rdquo": "&#8221;",
    "deg": "&#176;",
    "plus": "&#43;",
    "brvbar": "&#166;",
    "vbar": "|",
    "amp": "&amp;",
    "lt": "&lt;",
    "gt": "&gt;",
    "startsb": "[",
    "endsb": "]",
    "caret": "^",
    "asterisk": "*",
    "tilde": "~",
    "backslash": "\\",
    "backtick": "`",
    "two-colons": "::",
    "two-semicolons": ";;",
    "cpp": "C++",
}

# Typographic replacements, applied to already escaped text
_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"&amp;((?:[a-zA-Z][a-zA-Z]+\d{0,2}|#\d\d\d{0,4}|#x[\da-fA-F][\da-fA-F][\da-fA-F]{0,3}));"), r"&\1;"),
    (re.compile(r"\(C\)"), "&#169;"),
    (re.compile(r"\(R\)"), "&#174;"),
    (re.compile(r"\(TM\)"), "&#8482;"),
    (re.compile(r"(^|\n| )--( |\n|$)"), r"&#8201;&#8212;&#8201;"),
    (re.compile(r"(\w)--(?=\w)"), r"\1&#8212;&#8203;"),
    (re.compile(r"\.\.\."), "&#8230;&#8203;"),
    (re.compile(r"(\w)'(\w)"), r"\1&#8217;\2"),
    (re.compile(r"-&gt;"), "&#8594;"),
    (re.compile(r"=&gt;"), "&#8658;"),
    (re.compile(r"&lt;-"), "&#8592;"),
    (re.compile(r"&lt;="), "&#8656;"),
)

_ESCAPE_PLACEHOLDER = "\x00ESC\x00"
_ESCAPE_RESTORE = re.compile(r"\x00ESC\x00(\d+)\x00ESC\x00")
_ESCAPABLE = re.compile(r"\\([*_`#^~\[\]{}+<>\\:|])")
_HARD_BREAK_PLACEHOLDER = "\x00BR\x00"
_HARD_BREAK = re.compile(r"[ \t]\+[ \t]*$", re.MULTILINE)

# Loose scan for the next position where a substitution may start
_TRIGGER = re.compile(r"[+*_`#^~\[{<]|pass:\[|image:|link:|xref:|footnote:|(?:https?|ftp|irc)://")

_ATTRIBUTE_REFERENCE = re.compile(r"\{([A-Za-z0-9_][\w-]*)\}")


class InlineParser:
    r"""Apply inline substitutions to AsciiDoc text.

    Supported constructs:

    - Strong (``*text*``, ``**text**``), emphasis (``_text_``, ``__text__``),
      monospace (\`text\`, \`\`text\`\`), highlight (``#text#``) and role
      spans (``[.role]#text#``)
    - Superscript (``^text^``) and subscript (``~text~``)
    - Passthrough: ``+++raw+++`` and ``pass:[raw]`` (inserted unescaped),
      ``++text++`` and ``+text+`` (escaped, no formatting)
    - Links: ``link:url[text]``, bare URLs and ``url[text]``
    - Cross references: ``<<id>>``, ``<<id,text>>`` and ``xref:id[text]``
    - Inline anchors: ``[[id]]``
    - Inline images: ``image:path[alt,width,height]``
    - Footnotes: ``footnote:[text]`` and ``footnote:id[text]``
    - Attribute references: ``{name}``
    - Typographic replacements (``(C)``, ``--``, ``...``, arrows)
    - Hard line breaks (a trailing `` +``)

    Parameters
    ----------
    attributes : Mapping[str, str]
        Document attributes available to ``{name}`` references
    options : AsciiDocParserOptions or None, default = None
        Parser options (attribute policy, hard breaks)

    """

    def __init__(self, attributes: Mapping[str, str], options: AsciiDocParserOptions | None = None):
        """Initialize the inline parser."""
        self.attributes = attributes
        self.options = options or AsciiDocParserOptions()
        self.footnotes: list[Footnote] = []
        self._expanding: set[str] = set()
        self._setup_inline_patterns()

    def _setup_inline_patterns(self) -> None:
        """Compile the inline patterns.

        Constrained quotes need a non-word character (or the start of the text)
        before the opening mark and after the closing one; unconstrained
        (doubled) quotes match anywhere.
        """
        self.passthrough_triple_pattern = re.compile(r"\+\+\+(.+?)\+\+\+", re.DOTALL)
        self.passthrough_macro_pattern = re.compile(r"pass:\[(.*?)\]", re.DOTALL)
        self.passthrough_double_pattern = re.compile(r"\+\+(.+?)\+\+", re.DOTALL)
        self.passthrough_single_pattern = re.compile(r"(?<![\w+])\+(\S|\S.*?\S)\+(?![\w+])", re.DOTALL)

        self.strong_unconstrained_pattern = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
        self.strong_pattern = re.compile(r"(?<![\w;:}*])\*(\S|\S.*?\S)\*(?![\w*])", re.DOTALL)
        self.emphasis_unconstrained_pattern = re.compile(r"__(.+?)__", re.DOTALL)
        self.emphasis_pattern = re.compile(r"(?<![\w;:}_])_(\S|\S.*?\S)_(?![\w_])", re.DOTALL)
        self.mono_unconstrained_pattern = re.compile(r"``(.+?)``", re.DOTALL)
        self.mono_pattern = re.compile(r"(?<![\w;:}`])`(\S|\S.*?\S)`(?![\w`])", re.DOTALL)
        self.mark_unconstrained_pattern = re.compile(r"##(.+?)##", re.DOTALL)
        self.mark_pattern = re.compile(r"(?<![\w;:}#&])#(\S|\S.*?\S)#(?![\w#])", re.DOTALL)
        self.role_pattern = re.compile(r"\[([^\[\]]+)\](#{1,2})(\S|\S.*?\S)\2(?![\w#])", re.DOTALL)
        self.superscript_pattern = re.compile(r"\^(\S+?)\^")
        self.subscript_pattern = re.compile(r"~(\S+?)~")

        self.link_pattern = re.compile(r"link:([^\s\[]+)\[([^\]]*)\]")
        self.url_pattern = re.compile(
            r"(?<![\w/\"'=])((?:https?|ftp|irc)://[^\s\[\]<>\"]*[^\s\[\]<>\".,;:!?)])"
            r"(?:\[([^\]]*)\])?"
        )
        self.xref_pattern = re.compile(r"<<([\w:.#/-]+)(?:,\s*([^>]+?))?>>")
        self.xref_macro_pattern = re.compile(r"xref:([\w:.#/-]+)\[([^\]]*)\]")
        self.anchor_pattern = re.compile(r"\[\[([A-Za-z_:][\w:.-]*)(?:,\s*([^\]]+))?\]\]")
        self.image_pattern = re.compile(r"image:(?!:)([^\s\[]+)\[([^\]]*)\]")
        self.footnote_pattern = re.compile(r"footnote:([\w-]+)?\[(.*?)\]", re.DOTALL)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def convert(self, text: str, *, hardbreaks: bool = False) -> str:
        """Substitute inline markup and return HTML-safe text.

        Parameters
        ----------
        text : str
            Raw AsciiDoc text, possibly spanning several lines
        hardbreaks : bool, default = False
            Turn every line break into ``<br>`` (the ``%hardbreaks`` option)

        Returns
        -------
        str
            HTML-safe text

        """
        if not text:
            return ""

        if hardbreaks:
            text = f"{_HARD_BREAK_PLACEHOLDER}\n".join(text.split("\n"))
        elif self.options.honor_hard_breaks:
            text = _HARD_BREAK.sub(_HARD_BREAK_PLACEHOLDER, text)

        preprocessed, escape_map = self._preprocess_escapes(text)
        html = self._substitute(preprocessed, escape_map)
        html = self._postprocess_escapes(html, escape_map)
        return html.replace(_HARD_BREAK_PLACEHOLDER, "<br>")

    def resolve_attributes(self, text: str) -> str:
        """Replace attribute references in plain text (titles, ids) without escaping."""
        if not self.options.resolve_attribute_refs or "{" not in text:
            return text

        def replace(match: re.Match[str]) -> str:
            value = self._lookup_attribute(match.group(1))
            return match.group(0) if value is None else value

        return _ATTRIBUTE_REFERENCE.sub(replace, text)

    # ------------------------------------------------------------------
    # Escapes
    # ------------------------------------------------------------------

    def _preprocess_escapes(self, text: str) -> tuple[str, dict[str, str]]:
        """Swap backslash-escaped characters for numbered placeholders."""
        escape_map: dict[str, str] = {}

        def replace_escape(match: re.Match[str]) -> str:
            key = str(len(escape_map))
            escape_map[key] = match.group(1)
            return f"{_ESCAPE_PLACEHOLDER}{key}{_ESCAPE_PLACEHOLDER}"

        return _ESCAPABLE.sub(replace_escape, text), escape_map

    @staticmethod
    def _postprocess_escapes(html: str, escape_map: dict[str, str]) -> str:
        """Restore escaped characters, HTML-escaped."""
        if not escape_map:
            return html
        return _ESCAPE_RESTORE.sub(lambda m: escape_html(escape_map[m.group(1)], quote=False), html)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _substitute(self, text: str, escape_map: dict[str, str]) -> str:
        """Scan ``text`` and replace every recognized construct."""
        parts: list[str] = []
        pos = 0
        text_start = 0

        while pos < len(text):
            trigger = _TRIGGER.search(text, pos)
            if trigger is None:
                break
            pos = trigger.start()

            result = (
                self._try_parse_passthrough(text, pos, escape_map)
                or self._try_parse_image(text, pos, escape_map)
                or self._try_parse_links(text, pos, escape_map)
                or self._try_parse_footnote(text, pos, escape_map)
                or self._try_parse_attribute_ref(text, pos, escape_map)
                or self._try_parse_formatting(text, pos, escape_map)
            )

            if result is None:
                pos += 1
                continue

            html, end = result
            parts.append(self._text(text[text_start:pos]))
            parts.append(html)
            pos = text_start = end

        parts.append(self._text(text[text_start:]))
        return "".join(parts)

    @staticmethod
    def _text(raw: str) -> str:
        """Escape plain text and apply typographic replacements."""
        if not raw:
            return ""
        escaped = escape_html(raw, quote=False)
        for pattern, replacement in _REPLACEMENTS:
            escaped = pattern.sub(replacement, escaped)
        return escaped

    @staticmethod
    def _restore(raw: str, escape_map: dict[str, str]) -> str:
        """Restore escaped characters verbatim (for URLs and passthroughs)."""
        if not escape_map:
            return raw
        return _ESCAPE_RESTORE.sub(lambda m: escape_map[m.group(1)], raw)

    # ------------------------------------------------------------------
    # Handlers; each returns (html, end) or None
    # ------------------------------------------------------------------

    def _try_parse_passthrough(self, text: str, pos: int, escape_map: dict[str, str]) -> tuple[str, int] | None:
        match = self.passthrough_triple_pattern.match(text, pos) or self.passthrough_macro_pattern.match(text, pos)
        if match:
            return self._restore(match.group(1), escape_map), match.end()

        match = self.passthrough_double_pattern.match(text, pos) or self.passthrough_single_pattern.match(text, pos)
        if match:
            return escape_html(self._restore(match.group(1), escape_map), quote=False), match.end()

        return None

    def _try_parse_image(self, text: str, pos: int, escape_map: dict[str, str]) -> tuple[str, int] | None:
        match = self.image_pattern.match(text, pos)
        if not match:
            return None

        target = self._restore(match.group(1), escape_map)
        positional = [part.strip() for part in self._restore(match.group(2), escape_map).split(",")]
        alt = positional[0] if positional and positional[0] else default_image_alt(target)

        attrs = f' src="{escape_html(target)}" alt="{escape_html(alt)}"'
        for name, value in zip(("width", "height"), positional[1:3]):
            if value:
                attrs += f' {name}="{escape_html(value)}"'
        return f'<span class="image"><img{attrs}></span>', match.end()

    def _try_parse_links(self, text: str, pos: int, escape_map: dict[str, str]) -> tuple[str, int] | None:
        match = self.link_pattern.match(text, pos)
        if match:
            return self._link(self._restore(match.group(1), escape_map), match.group(2), escape_map), match.end()

        match = self.url_pattern.match(text, pos)
        if match:
            return self._link(self._restore(match.group(1), escape_map), match.group(2), escape_map), match.end()

        match = self.xref_pattern.match(text, pos) or self.xref_macro_pattern.match(text, pos)
        if match:
            ref_id = self._restore(match.group(1), escape_map).lstrip("#")
            label = match.group(2)
            inner = self._substitute(label, escape_map) if label else escape_html(f"[{ref_id}]", quote=False)
            return f'<a href="#{escape_html(ref_id)}">{inner}</a>', match.end()

        match = self.anchor_pattern.match(text, pos)
        if match:
            return f'<a id="{escape_html(match.group(1))}"></a>', match.end()

        return None

    def _link(self, url: str, label: Optional[str], escape_map: dict[str, str]) -> str:
        """Render an anchor; a trailing ``^`` in the label opens a new window."""
        extra = ""
        if label and label.endswith("^"):
            label = label[:-1]
            extra = ' target="_blank" rel="noopener"'

        if label:
            return f'<a href="{escape_html(url)}"{extra}>{self._substitute(label, escape_map)}</a>'
        return f'<a href="{escape_html(url)}" class="bare"{extra}>{escape_html(url, quote=False)}</a>'

    def _try_parse_footnote(self, text: str, pos: int, escape_map: dict[str, str]) -> tuple[str, int] | None:
        match = self.footnote_pattern.match(text, pos)
        if not match:
            return None

        footnote_id, body = match.group(1), match.group(2).strip()

        if footnote_id and not body:
            existing = next((note for note in self.footnotes if note.id == footnote_id), None)
            if existing is None:
                logger.warning("Reference to undefined footnote: %s", footnote_id)
                return escape_html(f"[{footnote_id}]", quote=False), match.end()
            return (
                f'<sup class="footnoteref">[<a class="footnote" href="#_footnotedef_{existing.index}" '
                f'title="View footnote.">{existing.index}</a>]</sup>'
            ), match.end()

        index = len(self.footnotes) + 1
        self.footnotes.append(Footnote(index=index, text=self._substitute(body, escape_map), id=footnote_id))
        sup_id = f' id="_footnote_{escape_html(footnote_id)}"' if footnote_id else ""
        return (
            f'<sup class="footnote"{sup_id}>[<a id="_footnoteref_{index}" class="footnote" '
            f'href="#_footnotedef_{index}" title="View footnote.">{index}</a>]</sup>'
        ), match.end()

    def _try_parse_attribute_ref(self, text: str, pos: int, escape_map: dict[str, str]) -> tuple[str, int] | None:
        if not self.options.resolve_attribute_refs:
            return None

        match = _ATTRIBUTE_REFERENCE.match(text, pos)
        if not match:
            return None

        name = match.group(1)
        if name in INTRINSIC_ATTRIBUTES and name not in self.attributes:
            return INTRINSIC_ATTRIBUTES[name], match.end()

        value = self._lookup_attribute(name)
        if value is None:
            return escape_html(match.group(0), quote=False), match.end()

        if name in self._expanding:
            return escape_html(value, quote=False), match.end()

        self._expanding.add(name)
        try:
            return self._substitute(value, escape_map), match.end()
        finally:
            self._expanding.discard(name)

    def _lookup_attribute(self, name: str) -> Optional[str]:
        """Return the value of an attribute, applying the missing-attribute policy."""
        if name in self.attributes:
            return self.attributes[name]
        if name in INTRINSIC_ATTRIBUTES:
            return INTRINSIC_ATTRIBUTES[name]

        policy = self.options.attribute_missing_policy
        if policy == "blank":
            return ""
        if policy == "warn":
            logger.warning("Undefined attribute reference: {%s}", name)
        return None

    def _try_parse_formatting(self, text: str, pos: int, escape_map: dict[str, str]) -> tuple[str, int] | None:
        match = self.role_pattern.match(text, pos)
        if match:
            roles = [role for role in re.split(r"[.\s]+", match.group(1).strip()) if role]
            inner = self._substitute(match.group(3), escape_map)
            if roles:
                return f'<span class="{escape_html(" ".join(roles))}">{inner}</span>', match.end()
            return f"<mark>{inner}</mark>", match.end()

        quote_rules: tuple[tuple[re.Pattern[str], Callable[[str], str]], ...] = (
            (self.strong_unconstrained_pattern, lambda inner: f"<strong>{inner}</strong>"),
            (self.strong_pattern, lambda inner: f"<strong>{inner}</strong>"),
            (self.emphasis_unconstrained_pattern, lambda inner: f"<em>{inner}</em>"),
            (self.emphasis_pattern, lambda inner: f"<em>{inner}</em>"),
            (self.mono_unconstrained_pattern, lambda inner: f"<code>{inner}</code>"),
            (self.mono_pattern, lambda inner: f"<code>{inner}</code>"),
            (self.mark_unconstrained_pattern, lambda inner: f"<mark>{inner}</mark>"),
            (self.mark_pattern, lambda inner: f"<mark>{inner}</mark>"),
            (self.superscript_pattern, lambda inner: f"<sup>{inner}</sup>"),
            (self.subscript_pattern, lambda inner: f"<sub>{inner}</sub>"),
        )

        for pattern, wrap in quote_rules:
            match = pattern.match(text, pos)
            if match:
                return wrap(self._substitute(match.group(1), escape_map)), match.end()

        return None


def default_image_alt(target: str) -> str:
    """Derive alt text from an image path: the file stem with ``-``/``_`` as spaces."""
    stem = PurePosixPath(target.split("?", 1)[0]).stem
    return re.sub(r"[-_]+", " ", stem)


__all__ = ["InlineParser", "INTRINSIC_ATTRIBUTES", "default_image_alt"]
