#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/cli.py
"""Command-line interface for semadoc.

Converts one AsciiDoc file, URL or standard input (``-``) to semantic HTML.

Output goes to ``-o/--output`` when given, to standard output with
``--stdout`` (or for standard input and remote sources), and otherwise to
``<name><outfilesuffix>`` next to the input file.

All value and boolean options support environment variable defaults using
the pattern SEMADOC_<OPTION_NAME>, e.g. ``SEMADOC_STANDALONE=true`` or
``SEMADOC_THEME=friendly``. Flags given on the command line take precedence.

Examples
--------
Basic usage::

    $ semadoc guide.adoc
    $ semadoc guide.adoc --standalone --format -o site/guide.html
    $ cat notes.adoc | semadoc - --no-highlight
    $ semadoc guide.adoc -a toc -a source-language=python -a sectids!

Exit codes: 0 success, 1 conversion error, 2 usage error, 3 missing
dependency.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from semadoc.constants import (
    DEFAULT_OUTPUT_BASENAME,
    ENV_PREFIX,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
)
from semadoc.exceptions import DependencyError, SemadocError, ValidationError
from semadoc.logging_utils import configure_logging
from semadoc.options import AsciiDocParserOptions, ConvertOptions, HtmlConverterOptions

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
_TRUE_VALUES = ("true", "1", "yes", "on")


def _env_key(dest: str) -> str:
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


class EnvironmentAwareAction(argparse.Action):
    """Store action that takes its default from ``SEMADOC_<DEST>``."""

    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any):
        env_value = os.environ.get(_env_key(dest))
        if env_value is not None:
            value_type = kwargs.get("type")
            try:
                kwargs["default"] = value_type(env_value) if value_type is not None else env_value
            except (ValueError, TypeError) as e:
                logger.warning("Invalid environment variable %s=%s: %s", _env_key(dest), env_value, e)
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Store the value given on the command line."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """``store_true`` action whose default can be switched on by ``SEMADOC_<DEST>``."""

    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any):
        env_value = os.environ.get(_env_key(dest))
        if env_value is not None:
            kwargs["default"] = _env_bool(env_value)
        super().__init__(option_strings, dest, **kwargs)


class EnvironmentAwareBooleanFalseAction(argparse._StoreFalseAction):
    """``store_false`` action (``--no-*``) whose default comes from ``SEMADOC_<DEST>``.

    The environment variable names the feature, so
    ``SEMADOC_SYNTAX_HIGHLIGHTING=false`` has the same effect as
    ``--no-highlight``.
    """

    def __init__(self, option_strings: Sequence[str], dest: str, **kwargs: Any):
        env_value = os.environ.get(_env_key(dest))
        if env_value is not None:
            kwargs["default"] = _env_bool(env_value)
        super().__init__(option_strings, dest, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser, reading environment defaults now."""
    from semadoc import __version__

    parser = argparse.ArgumentParser(
        prog="semadoc",
        description="Convert AsciiDoc to semantic HTML.",
        epilog="Options can also be set with SEMADOC_<OPTION_NAME> environment variables.",
    )
    parser.add_argument("input", help="AsciiDoc file, http(s) URL, or '-' for standard input")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    output_group = parser.add_argument_group("output")
    output_group.add_argument("-o", "--output", action=EnvironmentAwareAction, help="Write HTML to this file")
    output_group.add_argument(
        "--stdout", action=EnvironmentAwareBooleanAction, help="Write HTML to standard output instead of a file"
    )
    output_group.add_argument(
        "--standalone", action=EnvironmentAwareBooleanAction, help="Produce a complete HTML document"
    )
    output_group.add_argument(
        "--format", action=EnvironmentAwareBooleanAction, help="Pretty-print the HTML (requires beautifulsoup4)"
    )

    rendering_group = parser.add_argument_group("rendering")
    rendering_group.add_argument(
        "--theme", action=EnvironmentAwareAction, metavar="NAME", help="Pygments style for source listings"
    )
    rendering_group.add_argument(
        "--title-tag",
        action=EnvironmentAwareAction,
        metavar="TAG",
        help="Element used for block titles (default: summary)",
    )
    rendering_group.add_argument(
        "--no-highlight",
        dest="syntax_highlighting",
        action=EnvironmentAwareBooleanFalseAction,
        default=True,
        help="Disable syntax highlighting of source listings",
    )
    rendering_group.add_argument(
        "-a",
        "--attribute",
        dest="attributes",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a document attribute (NAME, NAME=VALUE, NAME! to unset; a trailing @ makes it soft)",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", action=EnvironmentAwareAction, metavar="PATH", help="Also log to a file")
    logging_group.add_argument(
        "--trace", action=EnvironmentAwareBooleanAction, help="Verbose log format with timestamps and logger names"
    )
    return parser


def parse_attribute_args(values: Sequence[str]) -> dict[str, Optional[str]]:
    """Turn ``-a`` arguments into preset attributes.

    Raises
    ------
    ValueError
        If an argument has no attribute name

    Examples
    --------
        >>> parse_attribute_args(["toc", "source-language=python", "sectids!"])
        {'toc': '', 'source-language': 'python', 'sectids': None}

    """
    attributes: dict[str, Optional[str]] = {}
    for value in values:
        name, sep, attribute_value = value.partition("=")
        name = name.strip()
        if not name.rstrip("!@"):
            raise ValueError(f"Invalid attribute argument: {value!r}")
        if name.endswith("!"):
            attributes[name[:-1]] = None
        else:
            attributes[name] = attribute_value if sep else ""
    return attributes


def build_options(args: argparse.Namespace) -> ConvertOptions:
    """Create conversion options from parsed arguments."""
    converter_kwargs: dict[str, Any] = {
        "standalone": args.standalone,
        "syntax_highlighting": args.syntax_highlighting,
    }
    if args.theme:
        converter_kwargs["highlight_theme"] = args.theme
    if args.title_tag:
        converter_kwargs["title_tag"] = args.title_tag

    parser_options = AsciiDocParserOptions(attributes=parse_attribute_args(args.attributes))
    return ConvertOptions(parser=parser_options, converter=HtmlConverterOptions(**converter_kwargs))


def get_exit_code_for_exception(exception: BaseException) -> int:
    """Map an exception raised during conversion to an exit code."""
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    return EXIT_ERROR


def _default_output_path(input_path: str, suffix: str) -> Path:
    source = Path(input_path).expanduser()
    return source.parent / f"{source.stem or DEFAULT_OUTPUT_BASENAME}{suffix}"


def run(args: argparse.Namespace, options: ConvertOptions) -> int:
    """Convert the input named by ``args`` and write the result."""
    from semadoc.api import load_file
    from semadoc.parsers import AsciiDocParser
    from semadoc.renderers import SemanticConverter
    from semadoc.utils.formatting import format_html
    from semadoc.utils.input_sources import is_remote_source
    from semadoc.utils.io_utils import write_content

    from_stdin = args.input == STDIN_MARKER
    if from_stdin:
        document = AsciiDocParser(options.parser).parse(sys.stdin.read())
    else:
        document = load_file(args.input, options)

    html = SemanticConverter(options.converter).convert_document(document)
    if args.format:
        html = format_html(html)

    if args.output:
        write_content(html, args.output)
        logger.info("Wrote %s", args.output)
    elif args.stdout or from_stdin or is_remote_source(args.input):
        write_content(html, sys.stdout)
    else:
        suffix = document.settings.get("outfilesuffix") or options.converter.outfilesuffix
        output_path = _default_output_path(args.input, suffix)
        write_content(html, output_path)
        logger.info("Wrote %s", output_path)
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command-line interface.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments without the program name; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    if args.output and args.stdout:
        parser.error("--output and --stdout are mutually exclusive")

    try:
        options = build_options(args)
    except (ValueError, ValidationError) as e:
        logger.error("%s", e)
        return EXIT_USAGE_ERROR

    try:
        return run(args, options)
    except (SemadocError, ImportError) as e:
        if args.trace:
            logger.exception("Conversion failed")
        else:
            logger.error("%s", e)
        return get_exit_code_for_exception(e)


__all__ = [
    "EnvironmentAwareAction",
    "EnvironmentAwareBooleanAction",
    "EnvironmentAwareBooleanFalseAction",
    "build_options",
    "create_parser",
    "get_exit_code_for_exception",
    "main",
    "parse_attribute_args",
]
