"""Shared schemas for lexical2html."""

from lexical2html.schemas.editor_state import EditorState, load_editor_state
from lexical2html.schemas.nodes import (
    CodeNode,
    DocumentNode,
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
)

__all__ = [
    "CodeNode",
    "DocumentNode",
    "EditorState",
    "HeadingNode",
    "LineBreakNode",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "ParagraphNode",
    "QuoteNode",
    "RootNode",
    "TextNode",
    "UnknownNode",
    "load_editor_state",
]
