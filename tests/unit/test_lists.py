#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the ordered and unordered list renderers."""

import pytest

from semadoc.ast import DocumentNode, ListItem, ListNode, NodeType
from semadoc.renderers.lists import olist, ordered_list_type, render_list_item, ulist


def _ulist(*texts, **kwargs):
    return ListNode(NodeType.ULIST, items=tuple(ListItem(text) for text in texts), **kwargs)


def _olist(*texts, **kwargs):
    return ListNode(NodeType.OLIST, items=tuple(ListItem(text) for text in texts), **kwargs)


@pytest.mark.unit
class TestUnorderedList:
    """Tests for ulist."""

    def test_simple_items_unwrapped(self, converter):
        assert ulist(_ulist("a", "b", "c"), converter) == "<ul><li>a</li><li>b</li><li>c</li></ul>"

    def test_long_item_wrapped_in_paragraph(self, converter):
        text = "x" * 95
        assert ulist(_ulist(text), converter) == f"<ul><li><p>{text}</p></li></ul>"

    def test_item_at_threshold_not_wrapped(self, converter):
        text = "y" * 80
        assert ulist(_ulist(text), converter) == f"<ul><li>{text}</li></ul>"

    def test_item_with_markup_wrapped(self, converter):
        result = ulist(_ulist("a <strong>bold</strong> move"), converter)
        assert result == "<ul><li><p>a <strong>bold</strong> move</p></li></ul>"

    def test_menu_style(self, converter):
        node = _ulist("File", "Edit", attributes={"style": "menu"})
        assert ulist(node, converter) == "<menu><li>File</li><li>Edit</li></menu>"

    def test_id_and_roles(self, converter):
        node = _ulist("a", id="todo", roles=("checklist",))
        assert ulist(node, converter) == '<ul id="todo" class="checklist"><li>a</li></ul>'

    def test_collapsible_titled_list(self, converter):
        node = _ulist("a", title="Steps", attributes={"collapsible-option": ""})
        assert ulist(node, converter) == "<details><summary>Steps</summary><ul><li>a</li></ul></details>"

    def test_titled_list(self, converter):
        node = _ulist("a", title="Steps")
        assert ulist(node, converter) == "<summary>Steps</summary><ul><li>a</li></ul>"


@pytest.mark.unit
class TestOrderedList:
    """Tests for olist and ordered_list_type."""

    @pytest.mark.parametrize(
        "style, expected",
        [
            ("arabic", None),
            (None, None),
            ("loweralpha", "a"),
            ("upperalpha", "A"),
            ("lowerroman", "i"),
            ("upperroman", "I"),
            ("decimal", "1"),
        ],
    )
    def test_type_mapping(self, style, expected):
        assert ordered_list_type(style) == expected

    def test_arabic_list_has_no_type(self, converter):
        node = _olist("one", "two", attributes={"style": "arabic"})
        assert olist(node, converter) == "<ol><li>one</li><li>two</li></ol>"

    def test_upperroman(self, converter):
        node = _olist("one", attributes={"style": "upperroman"})
        assert olist(node, converter) == '<ol type="I"><li>one</li></ol>'

    def test_unknown_style_falls_back(self, converter):
        node = _olist("one", attributes={"style": "decimal"})
        assert olist(node, converter) == '<ol type="1"><li>one</li></ol>'

    def test_start(self, converter):
        node = _olist("three", attributes={"style": "arabic", "start": "3"})
        assert olist(node, converter) == '<ol start="3"><li>three</li></ol>'

    def test_start_of_one_omitted(self, converter):
        node = _olist("one", attributes={"start": "1"})
        assert olist(node, converter) == "<ol><li>one</li></ol>"

    def test_other_attributes_kept(self, converter):
        node = _olist("one", attributes={"style": "loweralpha", "reversed": "reversed"})
        assert olist(node, converter) == '<ol reversed="reversed" type="a"><li>one</li></ol>'


@pytest.mark.unit
class TestListItems:
    """Tests for render_list_item and nesting."""

    def test_nested_list_of_same_kind(self, converter):
        inner = _ulist("b")
        outer = ListNode(NodeType.ULIST, items=(ListItem("a", blocks=(inner,)),))
        assert ulist(outer, converter) == "<ul><li>a<ul><li>b</li></ul></li></ul>"

    def test_nested_list_of_other_kind(self, converter):
        inner = _olist("b", attributes={"style": "loweralpha"})
        outer = ListNode(NodeType.ULIST, items=(ListItem("a", blocks=(inner,)),))
        assert ulist(outer, converter) == '<ul><li>a<ol type="a"><li>b</li></ol></li></ul>'

    def test_nested_paragraph(self, converter):
        item = ListItem("a", blocks=(DocumentNode(NodeType.PARAGRAPH, content="more"),))
        parent = _ulist()
        assert render_list_item(item, parent, converter) == "<li>a<p>more</p></li>"

    def test_item_with_blocks_text_not_wrapped(self, converter):
        text = "z" * 100
        item = ListItem(text, blocks=(DocumentNode(NodeType.PARAGRAPH, content="more"),))
        assert render_list_item(item, _ulist(), converter) == f"<li>{text}<p>more</p></li>"

    def test_list_is_not_modified(self, converter):
        node = _ulist("a", "b", attributes={"collapsible-option": ""})
        before = (node.items, dict(node.attributes))
        ulist(node, converter)
        assert (node.items, dict(node.attributes)) == before
