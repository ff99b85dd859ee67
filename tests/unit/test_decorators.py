#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for dependency checks and timing helpers."""

import importlib
import logging

import pytest

from semadoc.exceptions import DependencyError
from semadoc.utils import decorators
from semadoc.utils.decorators import debug_timer, requires_dependencies
from semadoc.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_available_dependency(self):
        @requires_dependencies("packaging", [("packaging", "packaging", "")])
        def run():
            return "ok"

        assert run() == "ok"

    def test_missing_dependency(self, monkeypatch):
        real_import = importlib.import_module

        def fake_import(name, *args, **kwargs):
            if name == "missing_pkg":
                raise ImportError("No module named 'missing_pkg'")
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(decorators.importlib, "import_module", fake_import)

        @requires_dependencies("demo", [("missing-pkg", "missing_pkg", ">=1.0")])
        def run():
            return "never"

        with pytest.raises(DependencyError) as exc_info:
            run()

        error = exc_info.value
        assert error.feature_name == "demo"
        assert error.missing_packages == [("missing-pkg", ">=1.0")]
        assert "pip install --upgrade" in str(error)
        assert isinstance(error.original_import_error, ImportError)

    def test_version_mismatch(self):
        @requires_dependencies("demo", [("packaging", "packaging", ">=9999")])
        def run():
            return "never"

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert exc_info.value.version_mismatches[0][:2] == ("packaging", ">=9999")
        assert "version mismatches" in str(exc_info.value)

    def test_wraps_metadata(self):
        @requires_dependencies("demo", [])
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


@pytest.mark.unit
class TestPackages:
    """Tests for installed-package checks."""

    def test_not_installed(self):
        assert get_package_version("semadoc-no-such-distribution") is None
        assert check_version_requirement("semadoc-no-such-distribution", ">=1") == (False, None)

    def test_invalid_specifier_accepted(self):
        meets, installed = check_version_requirement("packaging", "not a spec")
        assert meets is True
        assert installed == get_package_version("packaging")

    def test_requirement_met(self):
        assert check_version_requirement("packaging", ">=1")[0] is True


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_when_debug_enabled(self, caplog):
        logger = logging.getLogger("semadoc.test_timer")
        with caplog.at_level(logging.DEBUG, logger="semadoc.test_timer"):
            with debug_timer(logger, "Parsing"):
                pass
        assert "Parsing completed in" in caplog.text

    def test_silent_otherwise(self, caplog):
        logger = logging.getLogger("semadoc.test_timer_quiet")
        with caplog.at_level(logging.INFO, logger="semadoc.test_timer_quiet"):
            with debug_timer(logger, "Parsing"):
                pass
        assert caplog.text == ""
