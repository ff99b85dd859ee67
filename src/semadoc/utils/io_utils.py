#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/utils/io_utils.py
"""I/O utilities for writing rendered HTML.

This module provides the single place where semadoc writes output, either to
a file path (creating missing parent directories) or to a text stream such as
``sys.stdout``.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from semadoc.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def write_content(content: str, output: Union[str, Path, IO[str]]) -> None:
    """Write HTML to a path or a text stream.

    Parameters
    ----------
    content : str
        Text to write, encoded as UTF-8 when written to a file
    output : str, Path or IO[str]
        Destination file path, or an object with a ``write`` method

    Raises
    ------
    OutputWriteError
        If the file or one of its parent directories cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    Examples
    --------
        >>> write_content("<p>Hi</p>", "out/index.html")
        >>> Path("out/index.html").read_text()
        '<p>Hi</p>'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return

    if hasattr(output, "write"):
        output.write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
