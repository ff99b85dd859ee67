"""Pytest configuration and shared fixtures for the semadoc test suite."""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from semadoc.renderers import SemanticConverter

# Hypothesis profiles; select one with HYPOTHESIS_PROFILE
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


class RecordingHighlighter:
    """Highlighter stand-in that tags its output and records every call."""

    def __init__(self, languages=("javascript", "python", "plaintext")):
        self.languages = frozenset(languages)
        self.calls = []

    def supports(self, language):
        return bool(language) and language.lower() in self.languages

    def highlight(self, code, language, theme=None):
        self.calls.append((code, language, theme))
        return f"[{language}:{theme}]{code}"


@pytest.fixture
def highlighter():
    """Recording highlighter for renderer tests."""
    return RecordingHighlighter()


@pytest.fixture
def converter(highlighter):
    """Semantic converter with default options and the recording highlighter."""
    return SemanticConverter(highlighter=highlighter)


@pytest.fixture
def write_adoc(tmp_path):
    """Write an AsciiDoc file below ``tmp_path`` and return its path."""

    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by ``configure_logging``."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
