#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/exceptions.py
"""Exceptions raised by semadoc.

Errors only come from the edges of the pipeline: options validation, reading
files, fetching URLs, writing output and optional dependency checks. The
renderers never raise for a well-formed tree; a missing attribute or an
unknown node type produces default output instead.

Hierarchy
---------
- SemadocError

  - ValidationError
    - InvalidOptionsError

  - FileError
    - FileNotFoundError
    - FileAccessError

  - FetchError

  - ParsingError

  - RenderingError
    - OutputWriteError

  - DependencyError

"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class SemadocError(Exception):
    """Root of the semadoc exception tree.

    Parameters
    ----------
    message : str
        Human-readable description
    original_error : Exception, optional
        Lower-level exception that caused this one

    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """Store the message and the causing exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(SemadocError):
    """An argument or option value was rejected."""

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        parameter_value: Any = None,
        original_error: Optional[Exception] = None,
    ):
        """Record which parameter was rejected and its value."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A component received an options object of the wrong class.

    Parameters
    ----------
    component_name : str
        ``"asciidoc"``, ``"html"`` or ``"convert"``
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Build the default message from the two class names."""
        message = message or (
            f"{component_name} expects {expected_type.__name__} options, got {received_type.__name__}."
        )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(SemadocError):
    """A local source file could not be used."""

    def __init__(self, message: str, file_path: Optional[str] = None, original_error: Optional[Exception] = None):
        """Record the offending path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The source path does not exist or is not a regular file."""

    def __init__(self, file_path: str, message: Optional[str] = None, original_error: Optional[Exception] = None):
        """Default to ``File not found: <path>``."""
        super().__init__(message or f"File not found: {file_path}", file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """The source file exists but cannot be read or decoded."""

    def __init__(self, file_path: str, message: Optional[str] = None, original_error: Optional[Exception] = None):
        """Default to ``Cannot read <path>`` plus the cause."""
        if message is None:
            message = f"Cannot read {file_path}" + (f": {original_error}" if original_error else "")
        super().__init__(message, file_path=file_path, original_error=original_error)


class FetchError(SemadocError):
    """A remote source could not be retrieved.

    ``status_code`` is set for non-success HTTP responses and is None for
    transport failures (DNS, timeout, refused connection).
    """

    def __init__(
        self,
        url: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Describe the failure by status line or by cause."""
        if status_code is not None:
            detail = f"HTTP {status_code}" + (f" {reason}" if reason else "")
        else:
            detail = reason or str(original_error or "unknown error")
        super().__init__(f"Failed to fetch {url}: {detail}", original_error=original_error)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class ParsingError(SemadocError):
    """The source could not be turned into a document tree."""

    def __init__(self, message: str, line_number: Optional[int] = None, original_error: Optional[Exception] = None):
        """Append the source line number to the message when known."""
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message, original_error)
        self.line_number = line_number


class RenderingError(SemadocError):
    """HTML output could not be produced or delivered."""

    def __init__(self, message: str, rendering_stage: Optional[str] = None, original_error: Optional[Exception] = None):
        """Record the stage that failed."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """The HTML could not be written to its destination file."""

    def __init__(self, file_path: str, message: Optional[str] = None, original_error: Optional[Exception] = None):
        """Default to ``Cannot write <path>`` plus the cause."""
        if message is None:
            message = f"Cannot write {file_path}" + (f": {original_error}" if original_error else "")
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


def _requirement(name: str, spec: str) -> str:
    return f"{name}{spec}" if spec else name


class DependencyError(SemadocError):
    """An optional package needed by a feature is missing or too old.

    The message lists the problems and ends with a ``pip install`` line
    covering every package involved.

    Parameters
    ----------
    feature_name : str
        Feature that needs the packages (``"highlight"``, ``"format"``,
        ``"network"``)
    missing_packages : list of (name, version_spec)
        Packages that could not be imported
    version_mismatches : list of (name, required, installed), optional
        Installed packages that do not satisfy their version spec
    original_import_error : ImportError, optional
        First import failure encountered

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: Optional[list[tuple[str, str, str]]] = None,
        message: Optional[str] = None,
        original_import_error: Optional[ImportError] = None,
    ):
        """Build the message and install hint from the package lists."""
        version_mismatches = version_mismatches or []
        if message is None:
            message = self._describe(feature_name, missing_packages, version_mismatches)
        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error

    @staticmethod
    def _describe(
        feature_name: str,
        missing: Sequence[tuple[str, str]],
        mismatches: Sequence[tuple[str, str, str]],
    ) -> str:
        lines = []
        if missing:
            names = ", ".join(f"'{_requirement(name, spec)}'" for name, spec in missing)
            lines.append(f"'{feature_name}' requires the following packages: {names}")
        if mismatches:
            details = ", ".join(
                f"'{name}' (requires {required}, but {installed} is installed)"
                for name, required, installed in mismatches
            )
            lines.append(f"'{feature_name}' has version mismatches: {details}")

        requirements = [(name, spec) for name, spec in missing] + [(name, spec) for name, spec, _ in mismatches]
        if requirements:
            quoted = " ".join(f'"{_requirement(name, spec)}"' if spec else name for name, spec in requirements)
            lines.append(f"Install with: pip install --upgrade {quoted}")
        return "\n".join(lines)


__all__ = [
    "DependencyError",
    "FetchError",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "InvalidOptionsError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "SemadocError",
    "ValidationError",
]
