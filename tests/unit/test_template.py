#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the templated source builder."""

import pytest

from semadoc.options import ConvertOptions
from semadoc.template import AdocTemplate, PlainText, RawText, adoc, build_source, classify, plain, raw


@pytest.mark.unit
class TestSegments:
    """Tests for raw, plain and classify."""

    def test_raw_and_plain_wrap_strings(self):
        assert raw(42) == RawText("42")
        assert plain(None) == PlainText("None")

    def test_classify_keeps_segments(self):
        assert classify(RawText("x")) == RawText("x")
        assert classify(PlainText("y")) == PlainText("y")

    def test_classify_coerces_other_values(self):
        assert classify(3.5) == PlainText("3.5")
        assert classify(["a"]) == PlainText("['a']")

    def test_template_exposes_markers(self):
        assert AdocTemplate.raw("x") == RawText("x")
        assert adoc.plain("y") == PlainText("y")


@pytest.mark.unit
class TestBuildSource:
    """Tests for build_source."""

    def test_raw_fence_between_plain_segments(self):
        assert build_source(["Before", "After"], [raw("----\ncode\n----")]) == "Before\n----\ncode\n----\nAfter"

    def test_plain_values_inserted_as_is(self):
        assert build_source(["Hello ", "!"], ["*World*"]) == "Hello *World*!"

    def test_plain_fence_not_moved(self):
        assert build_source(["Before", "After"], ["----"]) == "Before----After"

    def test_no_leading_newline_after_line_end(self):
        assert build_source(["Before\n", "\nAfter"], [raw("----\ncode\n----")]) == "Before\n----\ncode\n----\nAfter"

    def test_no_leading_newline_at_start(self):
        assert build_source(["", "\nAfter"], [raw("====\nx\n====")]) == "====\nx\n====\nAfter"

    def test_indented_fence_detected(self):
        result = build_source(["Intro", ""], [raw("  ----\nx\n  ----")])
        assert result == "Intro\n  ----\nx\n  ----"

    def test_short_dash_run_is_not_a_fence(self):
        assert build_source(["a", "b"], [raw("--\nx")]) == "a--\nx\nb"

    def test_trailing_newline_only_when_needed(self):
        assert build_source(["a ", "\nb"], [raw("x")]) == "a x\nb"
        assert build_source(["a ", "b"], [raw("x\n")]) == "a x\nb"

    def test_raw_value_at_end(self):
        assert build_source(["Text", ""], [raw("----\nx\n----")]) == "Text\n----\nx\n----"

    def test_raw_value_before_empty_segment(self):
        assert build_source(["", "", ""], [raw("x"), "y"]) == "x\ny"

    def test_single_string(self):
        assert build_source("    == Title\n\n    Body\n") == "== Title\n\nBody"

    def test_fewer_values_than_segments(self):
        assert build_source(["a", "b", "c"], ["1"]) == "a1bc"

    def test_too_many_values(self):
        with pytest.raises(ValueError):
            build_source(["only"], ["one", "two"])

    def test_result_is_dedented(self):
        strings = ["\n    * ", "\n    * ", "\n    "]
        assert build_source(strings, ["a", "b"]) == "* a\n* b"


@pytest.mark.unit
class TestAdocTemplate:
    """Tests for AdocTemplate."""

    def test_source_does_not_convert(self):
        assert adoc.source(["  * ", "\n  * b"], "a") == "* a\n* b"

    def test_with_options_returns_new_template(self):
        options = ConvertOptions()
        bound = adoc.with_options(options)
        assert isinstance(bound, AdocTemplate)
        assert bound is not adoc
        assert bound.options is options
        assert adoc.options is None
