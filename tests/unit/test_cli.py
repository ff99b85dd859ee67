#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for command-line argument handling."""

import pytest

from semadoc.cli import build_options, create_parser, get_exit_code_for_exception, main, parse_attribute_args
from semadoc.exceptions import DependencyError, FetchError


@pytest.mark.unit
class TestParseAttributeArgs:
    """Tests for -a argument parsing."""

    def test_forms(self):
        result = parse_attribute_args(["toc", "source-language=python", "sectids!"])
        assert result == {"toc": "", "source-language": "python", "sectids": None}

    def test_soft_value_kept(self):
        assert parse_attribute_args(["icons=font@"]) == {"icons": "font@"}

    def test_value_may_contain_equals(self):
        assert parse_attribute_args(["query=a=b"]) == {"query": "a=b"}

    @pytest.mark.parametrize("value", ["=", "!", "=x", "@"])
    def test_missing_name(self, value):
        with pytest.raises(ValueError, match="Invalid attribute argument"):
            parse_attribute_args([value])


@pytest.mark.unit
class TestCreateParser:
    """Tests for argument defaults and environment variables."""

    def test_defaults(self):
        args = create_parser().parse_args(["guide.adoc"])
        assert args.input == "guide.adoc"
        assert args.output is None
        assert args.stdout is False
        assert args.standalone is False
        assert args.syntax_highlighting is True
        assert args.attributes == []
        assert args.log_level == "WARNING"

    def test_flags(self):
        args = create_parser().parse_args(
            ["guide.adoc", "--standalone", "--no-highlight", "--theme", "friendly", "-a", "toc", "-a", "x=1"]
        )
        assert args.standalone is True
        assert args.syntax_highlighting is False
        assert args.theme == "friendly"
        assert args.attributes == ["toc", "x=1"]

    def test_log_level_case_insensitive(self):
        assert create_parser().parse_args(["a.adoc", "--log-level", "debug"]).log_level == "DEBUG"

    def test_environment_defaults(self, monkeypatch):
        monkeypatch.setenv("SEMADOC_STANDALONE", "true")
        monkeypatch.setenv("SEMADOC_SYNTAX_HIGHLIGHTING", "false")
        monkeypatch.setenv("SEMADOC_THEME", "friendly")
        args = create_parser().parse_args(["guide.adoc"])
        assert args.standalone is True
        assert args.syntax_highlighting is False
        assert args.theme == "friendly"

    def test_command_line_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("SEMADOC_THEME", "friendly")
        assert create_parser().parse_args(["guide.adoc", "--theme", "monokai"]).theme == "monokai"

    def test_flag_overrides_environment_boolean(self, monkeypatch):
        monkeypatch.setenv("SEMADOC_SYNTAX_HIGHLIGHTING", "yes")
        assert create_parser().parse_args(["guide.adoc", "--no-highlight"]).syntax_highlighting is False


@pytest.mark.unit
class TestBuildOptions:
    """Tests for turning arguments into options."""

    def test_options_from_arguments(self):
        args = create_parser().parse_args(
            ["guide.adoc", "--standalone", "--title-tag", "h6", "--theme", "friendly", "-a", "toc", "-a", "sectids!"]
        )
        options = build_options(args)
        assert options.converter.standalone is True
        assert options.converter.title_tag == "h6"
        assert options.converter.highlight_theme == "friendly"
        assert dict(options.parser.attributes) == {"toc": "", "sectids": None}

    def test_defaults_untouched(self):
        options = build_options(create_parser().parse_args(["guide.adoc"]))
        assert options.converter.title_tag == "summary"
        assert options.converter.highlight_theme is None

    def test_invalid_title_tag(self):
        with pytest.raises(ValueError):
            build_options(create_parser().parse_args(["guide.adoc", "--title-tag", "not a tag"]))


@pytest.mark.unit
class TestExitCodes:
    """Tests for exit code mapping and usage errors."""

    def test_exception_mapping(self):
        assert get_exit_code_for_exception(DependencyError("highlight", [("Pygments", ">=2.17")])) == 3
        assert get_exit_code_for_exception(ImportError("x")) == 3
        assert get_exit_code_for_exception(FetchError("https://x.org/a.adoc", status_code=404)) == 1

    def test_invalid_option_is_usage_error(self, tmp_path, restore_root_logger):
        source = tmp_path / "a.adoc"
        source.write_text("x", encoding="utf-8")
        assert main([str(source), "--title-tag", "1x"]) == 2

    def test_bad_attribute_is_usage_error(self, tmp_path, restore_root_logger):
        assert main([str(tmp_path / "a.adoc"), "-a", "="]) == 2

    def test_output_and_stdout_conflict(self, restore_root_logger):
        with pytest.raises(SystemExit) as exc_info:
            main(["a.adoc", "-o", "out.html", "--stdout"])
        assert exc_info.value.code == 2

    def test_missing_input_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
