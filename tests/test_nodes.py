"""Tests for document tree models and editor state loading."""

from __future__ import annotations

import json
from typing import Any

import pytest
from pydantic import ValidationError

from lexical2html.exceptions import DocumentShapeError, Lexical2HtmlError
from lexical2html.schemas import (
    CodeNode,
    EditorState,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    QuoteNode,
    RootNode,
    TextNode,
    UnknownNode,
    load_editor_state,
)
from node_builders import editor_state, element, linebreak, text


class TestLoadEditorState:
    """Tests for load_editor_state function."""

    def test_routes_each_tag_to_its_model(self, sample_state: dict[str, Any]) -> None:
        state = load_editor_state(sample_state)
        heading, paragraph, lst, quote, code, empty = state.root.children

        assert isinstance(heading, HeadingNode)
        assert isinstance(paragraph, ParagraphNode)
        assert isinstance(paragraph.children[1], LinkNode)
        assert isinstance(paragraph.children[1].children[0], TextNode)
        assert isinstance(lst, ListNode)
        assert all(isinstance(item, ListItemNode) for item in lst.children)
        assert isinstance(quote, QuoteNode)
        assert isinstance(quote.children[1], LineBreakNode)
        assert isinstance(code, CodeNode)
        assert isinstance(empty, ParagraphNode) and empty.children == []

    def test_accepts_json_text(self, sample_state: dict[str, Any]) -> None:
        from_text = load_editor_state(json.dumps(sample_state))
        from_bytes = load_editor_state(json.dumps(sample_state).encode("utf-8"))

        assert from_text == load_editor_state(sample_state)
        assert from_bytes == from_text

    def test_returns_existing_state_unchanged(self) -> None:
        state = EditorState(root=RootNode())
        assert load_editor_state(state) is state

    def test_accepts_root_model_in_mapping(self) -> None:
        root = RootNode(children=[ParagraphNode(children=[TextNode(text="hi")])])
        assert load_editor_state({"root": root}).root == root

    @pytest.mark.parametrize(
        "payload",
        ["{not json", b"\xff\xfe", "[]", "{}", {"root": None}, {"root": "text"}, {"other": {}}],
    )
    def test_rejects_malformed_payloads(self, payload: Any) -> None:
        with pytest.raises(DocumentShapeError):
            load_editor_state(payload)

    def test_shape_error_is_package_error(self) -> None:
        assert issubclass(DocumentShapeError, Lexical2HtmlError)


class TestUnknownNodes:
    """Unrecognized node kinds load instead of failing validation."""

    def test_unknown_tag_keeps_type_and_children(self) -> None:
        state = load_editor_state(editor_state(element("table", [element("tablerow", [text("cell")])])))
        table = state.root.children[0]

        assert isinstance(table, UnknownNode)
        assert table.type == "table"
        assert isinstance(table.children[0], UnknownNode)
        assert table.children[0].children[0] == TextNode(text="cell")

    def test_missing_type_is_unknown(self) -> None:
        state = load_editor_state({"root": {"children": [{"children": [text("x")]}]}})
        node = state.root.children[0]

        assert isinstance(node, UnknownNode)
        assert node.type == ""

    def test_nested_root_is_unknown(self) -> None:
        state = load_editor_state(editor_state(element("root", [text("x")])))
        assert isinstance(state.root.children[0], UnknownNode)

    def test_scalar_children_become_empty_unknown_nodes(self) -> None:
        state = load_editor_state(editor_state(element("paragraph", ["stray", 3, None])))
        assert state.root.children[0].children == [UnknownNode(), UnknownNode(), UnknownNode()]


class TestFieldDefaults:
    """Missing or malformed attributes fall back to safe defaults."""

    def test_text_defaults(self) -> None:
        node = TextNode.model_validate({"type": "text", "text": None, "format": None})
        assert node.text == ""
        assert node.format == 0

    @pytest.mark.parametrize(("raw", "expected"), [(-4, 0), ("3", 3), ("bold", 0), (True, 0), (2.5, 0)])
    def test_text_format_coercion(self, raw: Any, expected: int) -> None:
        assert TextNode.model_validate({"text": "x", "format": raw}).format == expected

    def test_non_list_children_become_empty(self) -> None:
        node = ParagraphNode.model_validate({"type": "paragraph", "children": {"type": "text"}})
        assert node.children == []

    def test_missing_children_default_to_empty(self) -> None:
        assert ListItemNode.model_validate({"type": "listitem"}).children == []

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("", 0), ("left", 1), ("center", 2), ("right", 3), ("justify", 4), ("start", 5), ("end", 6), (2, 2), (None, 0)],
    )
    def test_element_alignment_accepts_names_and_codes(self, raw: Any, expected: int) -> None:
        assert ParagraphNode.model_validate({"format": raw}).format == expected

    @pytest.mark.parametrize(("raw", "expected"), [("h3", "h3"), ("H4", "h4"), ("h9", "h1"), (None, "h1"), (2, "h1")])
    def test_heading_tag(self, raw: Any, expected: str) -> None:
        assert HeadingNode.model_validate({"tag": raw}).tag == expected

    def test_list_type_defaults_to_numbered(self) -> None:
        assert ListNode.model_validate({"type": "list"}).list_type == "number"
        assert ListNode.model_validate({"listType": "bullet"}).list_type == "bullet"
        assert ListNode(list_type="check").list_type == "check"

    @pytest.mark.parametrize(("raw", "expected"), [(None, "#"), ("", "#"), ("/about", "/about")])
    def test_link_url(self, raw: Any, expected: str) -> None:
        assert LinkNode.model_validate({"url": raw}).url == expected

    def test_link_without_url_key(self) -> None:
        assert LinkNode.model_validate({"type": "link"}).url == "#"

    def test_empty_link_title_is_none(self) -> None:
        assert LinkNode.model_validate({"title": ""}).title is None
        assert LinkNode.model_validate({"title": "Docs"}).title == "Docs"

    def test_linebreak_is_a_leaf(self) -> None:
        node = load_editor_state(editor_state(element("paragraph", [linebreak()]))).root.children[0].children[0]
        assert node == LineBreakNode()
        assert not hasattr(node, "children")


class TestImmutability:
    def test_nodes_are_frozen(self) -> None:
        node = TextNode(text="x")
        with pytest.raises(ValidationError):
            node.text = "y"

    def test_editor_state_is_frozen(self) -> None:
        state = EditorState(root=RootNode())
        with pytest.raises(ValidationError):
            state.root = RootNode(children=[TextNode(text="x")])
