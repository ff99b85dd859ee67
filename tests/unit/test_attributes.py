#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the attribute fragment builders."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from semadoc.ast import DocumentNode, NodeType
from semadoc.constants import DEFAULT_EXCLUDED_ATTRIBUTES, OPTION_SUFFIX
from semadoc.renderers.attributes import (
    build_block_attributes,
    build_class,
    build_id,
    build_other_attributes,
    build_title,
    get_options,
    has_option,
)

attribute_keys = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-", min_size=1, max_size=12)
reserved_keys = st.sampled_from(sorted(DEFAULT_EXCLUDED_ATTRIBUTES) + ["collapsible-option", "open-option"])


@pytest.mark.unit
class TestBuildId:
    """Tests for build_id."""

    def test_id_fragment(self):
        node = DocumentNode(NodeType.PARAGRAPH, id="intro")
        assert build_id(node) == ' id="intro"'

    def test_missing_and_empty_id(self):
        assert build_id(DocumentNode(NodeType.PARAGRAPH)) == ""
        assert build_id(DocumentNode(NodeType.PARAGRAPH, id="")) == ""


@pytest.mark.unit
class TestBuildClass:
    """Tests for build_class."""

    def test_roles_then_extra_classes(self):
        node = DocumentNode(NodeType.PARAGRAPH, roles=("lead", "big"))
        assert build_class(node, ("highlight",)) == ' class="lead big highlight"'

    def test_duplicates_removed(self):
        node = DocumentNode(NodeType.PARAGRAPH, roles=("lead",))
        assert build_class(node, ("lead", "extra")) == ' class="lead extra"'

    def test_no_classes(self):
        assert build_class(DocumentNode(NodeType.PARAGRAPH)) == ""


@pytest.mark.unit
class TestBuildOtherAttributes:
    """Tests for build_other_attributes."""

    def test_reserved_and_option_keys_skipped(self):
        node = DocumentNode(
            NodeType.PARAGRAPH,
            attributes={
                "id": "x",
                "role": "lead",
                "style": "abstract",
                "title": "T",
                "$positional": "abstract",
                "collapsible-option": "",
                "data-level": "2",
            },
        )
        assert build_other_attributes(node) == ' data-level="2"'

    def test_empty_values_skipped(self):
        node = DocumentNode(NodeType.PARAGRAPH, attributes={"lang": "", "dir": "rtl"})
        assert build_other_attributes(node) == ' dir="rtl"'

    def test_values_escaped(self):
        node = DocumentNode(NodeType.PARAGRAPH, attributes={"data-q": 'a"b<c'})
        assert build_other_attributes(node) == ' data-q="a&quot;b&lt;c"'

    def test_exclude_and_extra_attributes(self):
        node = DocumentNode(NodeType.LISTING, attributes={"language": "python", "data-x": "1"})
        result = build_other_attributes(node, extra_attributes={"data-x": "2"}, exclude=("language",))
        assert result == ' data-x="2"'

    @given(st.dictionaries(st.one_of(attribute_keys, reserved_keys), st.text(max_size=20), max_size=8))
    def test_excluded_keys_never_rendered(self, attributes):
        node = DocumentNode(NodeType.PARAGRAPH, attributes=attributes)
        result = build_other_attributes(node)

        for key, value in node.attributes.items():
            rendered = f' {key}="' in result
            if key in DEFAULT_EXCLUDED_ATTRIBUTES or key.endswith(OPTION_SUFFIX) or not value:
                assert not rendered
            else:
                assert rendered


@pytest.mark.unit
class TestOptions:
    """Tests for get_options and has_option."""

    def test_option_names(self):
        node = DocumentNode(NodeType.EXAMPLE, attributes={"collapsible-option": "", "open-option": "", "x": "1"})
        assert get_options(node) == ("collapsible", "open")
        assert get_options(node, ("open", "extra")) == ("collapsible", "open", "extra")

    def test_has_option_ignores_value(self):
        node = DocumentNode(NodeType.EXAMPLE, attributes={"collapsible-option": ""})
        assert has_option(node, "collapsible")
        assert not has_option(node, "open")


@pytest.mark.unit
class TestBuildTitle:
    """Tests for build_title and build_block_attributes."""

    def test_title_with_caption_escaped(self):
        node = DocumentNode(NodeType.EXAMPLE, title="A & B", caption="Example 1. ")
        assert build_title(node) == "<summary>Example 1. A &amp; B</summary>"

    def test_custom_tag(self):
        node = DocumentNode(NodeType.PARAGRAPH, title="Note")
        assert build_title(node, "div") == "<div>Note</div>"

    def test_no_title(self):
        assert build_title(DocumentNode(NodeType.PARAGRAPH)) == ""
        assert build_title(DocumentNode(NodeType.PARAGRAPH, title="")) == ""

    def test_block_attributes_order(self):
        node = DocumentNode(NodeType.PARAGRAPH, id="p1", roles=("lead",), attributes={"dir": "rtl"})
        assert build_block_attributes(node, ("extra",)) == ' id="p1" class="lead extra" dir="rtl"'
