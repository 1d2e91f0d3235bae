"""Plain-text extraction and word/character counts for a document."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict

from lexical2html.schemas.nodes import (
    CodeNode,
    HeadingNode,
    LineBreakNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    QuoteNode,
    RootNode,
    TextNode,
)

DOUBLE_LINE_BREAK = "\n\n"

_BLOCK_NODES = (
    ParagraphNode,
    HeadingNode,
    QuoteNode,
    CodeNode,
    ListNode,
    ListItemNode,
)


class TextStats(BaseModel):
    """Word and character counts for a document's plain text."""

    model_config = ConfigDict(frozen=True)

    words: int
    characters: int


def extract_text(root: RootNode | None) -> str:
    """Return the document's plain text.

    Sibling blocks are separated by a blank line, line breaks become ``\\n``,
    and inline containers such as links contribute their text unseparated.
    """
    if root is None:
        return ""
    return _element_text(root.children)


def count_words(text: str) -> int:
    """Count whitespace-separated words; blank text has none."""
    if not text.strip():
        return 0
    return len(text.split())


def text_stats(root: RootNode | None) -> TextStats:
    text = extract_text(root)
    return TextStats(words=count_words(text), characters=len(text))


def _element_text(children: Sequence[Any]) -> str:
    parts: list[str] = []
    last = len(children) - 1
    for index, child in enumerate(children):
        parts.append(_node_text(child))
        if index != last and isinstance(child, _BLOCK_NODES):
            parts.append(DOUBLE_LINE_BREAK)
    return "".join(parts)


def _node_text(node: Any) -> str:
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, LineBreakNode):
        return "\n"
    children = getattr(node, "children", None)
    if not isinstance(children, (list, tuple)):
        return ""
    return _element_text(children)
