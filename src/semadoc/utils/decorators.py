#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/utils/decorators.py
"""Decorators and context managers shared by semadoc collaborators.

Highlighting, pretty-printing and remote loading each need an optional
third-party package. ``requires_dependencies`` checks availability and
version right before the decorated call, so importing semadoc never fails
because of them and every feature reports a missing package the same way.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from semadoc.exceptions import DependencyError
from semadoc.utils.packages import check_version_requirement

PackageSpec = Tuple[str, str, str]


def _check_packages(
    packages: Sequence[PackageSpec],
) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]], Optional[ImportError]]:
    """Return (missing, version mismatches, first import error) for ``packages``."""
    missing: list[tuple[str, str]] = []
    mismatches: list[tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if not version_spec:
            continue
        satisfied, installed = check_version_requirement(install_name, version_spec)
        if not satisfied:
            mismatches.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatches, first_error


def requires_dependencies(feature_name: str, packages: List[PackageSpec]) -> Callable:
    """Fail with ``DependencyError`` unless ``packages`` are importable and recent enough.

    Parameters
    ----------
    feature_name : str
        Feature named in the error message (``"highlight"``, ``"format"``,
        ``"network"``)
    packages : list of (install_name, import_name, version_spec)
        Index name, import name and version specifier (``""`` for any
        version) of each required package

    Returns
    -------
    Callable
        Decorator performing the check on every call

    Examples
    --------
        >>> @requires_dependencies("format", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def prettify(html):
        ...     from bs4 import BeautifulSoup
        ...     return BeautifulSoup(html, "html.parser").prettify()

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, import_error = _check_packages(packages)
            if missing or mismatches:
                raise DependencyError(
                    feature_name=feature_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=import_error,
                ) from import_error
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log ``"<operation> completed in N.NNNs"`` at DEBUG when the block exits.

    Nothing is measured when ``logger`` is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Parsing (asciidoc)"):
        ...     document = parser.parse(source)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug("%s completed in %.3fs", operation, time.perf_counter() - started)


__all__ = ["debug_timer", "requires_dependencies"]
