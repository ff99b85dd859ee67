#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/api.py
"""High-level conversion API.

``convert`` turns AsciiDoc source into an HTML string, ``load_file`` parses a
local file or an http(s) URL into a ``Document``, and ``convert_file`` does
both and writes the result next to a local input.

Options may be a ``ConvertOptions`` bundle, or just the parser or converter
options when the other half should keep its defaults.

Examples
--------
    >>> from semadoc import convert
    >>> convert("* Item A\\n* Item B")
    '<ul><li>Item A</li><li>Item B</li></ul>'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from semadoc.ast import Document
from semadoc.constants import DEFAULT_OUTPUT_BASENAME
from semadoc.exceptions import InvalidOptionsError
from semadoc.options import AsciiDocParserOptions, ConvertOptions, HtmlConverterOptions
from semadoc.parsers import AsciiDocParser
from semadoc.renderers import SemanticConverter
from semadoc.utils.decorators import debug_timer
from semadoc.utils.formatting import format_html_async
from semadoc.utils.input_sources import LoadedSource, is_remote_source, load_source
from semadoc.utils.io_utils import write_content

logger = logging.getLogger(__name__)

OptionsLike = Union[ConvertOptions, AsciiDocParserOptions, HtmlConverterOptions, None]
PathOrUrl = Union[str, Path]


def _resolve_options(options: OptionsLike) -> ConvertOptions:
    """Normalize the accepted option shapes to a ``ConvertOptions`` bundle."""
    if options is None:
        return ConvertOptions()
    if isinstance(options, ConvertOptions):
        return options
    if isinstance(options, AsciiDocParserOptions):
        return ConvertOptions(parser=options)
    if isinstance(options, HtmlConverterOptions):
        return ConvertOptions(converter=options)
    raise InvalidOptionsError(component_name="convert", expected_type=ConvertOptions, received_type=type(options))


def _render(document: Document, options: ConvertOptions) -> str:
    with debug_timer(logger, "Rendering (html)"):
        return SemanticConverter(options.converter).convert_document(document)


def _parse(source: str, options: AsciiDocParserOptions) -> Document:
    with debug_timer(logger, "Parsing (asciidoc)"):
        return AsciiDocParser(options).parse(source)


def convert(source: str, options: OptionsLike = None) -> str:
    """Convert AsciiDoc source to HTML.

    Parameters
    ----------
    source : str
        AsciiDoc source text
    options : ConvertOptions, AsciiDocParserOptions, HtmlConverterOptions or None
        Conversion options; defaults produce an embeddable fragment

    Returns
    -------
    str
        HTML fragment, or a complete page when ``standalone`` is set

    Raises
    ------
    ParsingError
        If ``source`` is not a string
    InvalidOptionsError
        If ``options`` is of an unsupported type

    """
    resolved = _resolve_options(options)
    document = _parse(source, resolved.parser)
    return _render(document, resolved)


async def convert_formatted(source: str, options: OptionsLike = None) -> str:
    """Convert AsciiDoc source to pretty-printed HTML.

    The conversion itself is synchronous; pretty-printing runs in a worker
    thread.
    """
    html = convert(source, options)
    return await format_html_async(html)


def _source_attributes(loaded: LoadedSource, options: ConvertOptions) -> dict[str, str]:
    """Soft document attributes describing where the source came from."""
    attributes = {"docname@": loaded.stem, "outfilesuffix@": options.converter.outfilesuffix}
    if loaded.path is not None:
        attributes["docfile@"] = str(loaded.path)
        attributes["docdir@"] = str(loaded.path.parent)
    return attributes


def _parse_loaded(loaded: LoadedSource, options: ConvertOptions) -> Document:
    presets = {**_source_attributes(loaded, options), **options.parser.attributes}
    parser_options = options.parser.create_updated(attributes=presets)
    return _parse(loaded.text, parser_options)


def load_file(path_or_url: PathOrUrl, options: OptionsLike = None) -> Document:
    """Read and parse a local file or an http(s) URL.

    Parameters
    ----------
    path_or_url : str or Path
        Local file path, or an ``http://``/``https://`` URL
    options : ConvertOptions, AsciiDocParserOptions, HtmlConverterOptions or None
        Parser options and remote loading settings

    Returns
    -------
    Document
        Parsed document. ``docname``, ``outfilesuffix`` and, for local files,
        ``docfile`` and ``docdir`` are set as soft document attributes.

    Raises
    ------
    FileNotFoundError
        If a local path does not exist
    FileAccessError
        If a local file cannot be read
    FetchError
        If a URL cannot be fetched
    DependencyError
        If httpx is needed for a URL but not installed

    """
    resolved = _resolve_options(options)
    loaded = load_source(path_or_url, timeout=resolved.fetch_timeout, user_agent=resolved.user_agent)
    logger.info("Loaded %s", loaded.url or loaded.path)
    return _parse_loaded(loaded, resolved)


def convert_file(
    path_or_url: PathOrUrl,
    options: OptionsLike = None,
    *,
    to_file: bool = True,
    out_file_name: str | None = None,
) -> Union[str, Document]:
    """Convert a local file or URL, writing the HTML next to a local input.

    Parameters
    ----------
    path_or_url : str or Path
        Local file path, or an ``http://``/``https://`` URL
    options : ConvertOptions, AsciiDocParserOptions, HtmlConverterOptions or None
        Conversion options
    to_file : bool, default = True
        Write the output file. When False the HTML string is returned.
    out_file_name : str, optional
        Output file name, resolved against the input's directory. Defaults
        to the input's base name plus the ``outfilesuffix`` attribute.

    Returns
    -------
    str or Document
        The parsed ``Document`` when a file was written, else the HTML.
        Remote inputs are never written to disk; their HTML is returned
        with a warning.

    Raises
    ------
    OutputWriteError
        If the output file cannot be written

    """
    resolved = _resolve_options(options)
    document = load_file(path_or_url, resolved)
    html = _render(document, resolved)

    if not to_file:
        return html

    if is_remote_source(path_or_url):
        logger.warning("Not writing output for remote source %s; returning the HTML instead", path_or_url)
        return html

    input_path = Path(path_or_url).expanduser()
    if out_file_name is None:
        suffix = document.settings.get("outfilesuffix") or resolved.converter.outfilesuffix
        out_file_name = f"{input_path.stem or DEFAULT_OUTPUT_BASENAME}{suffix}"

    output_path = input_path.parent / out_file_name
    write_content(html, output_path)
    logger.info("Wrote %s", output_path)
    return document


__all__ = ["convert", "convert_file", "convert_formatted", "load_file"]
