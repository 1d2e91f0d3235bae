"""lexical2html: serialize rich-text editor documents into article HTML."""

from lexical2html.emitter import emit_children, emit_node
from lexical2html.exceptions import DocumentShapeError, Lexical2HtmlError
from lexical2html.formatting import (
    Alignment,
    AlignmentMode,
    TextFormat,
    alignment_style,
    resolve_alignment,
    wrap_inline,
)
from lexical2html.options import SerializerOptions
from lexical2html.schemas import EditorState, RootNode, load_editor_state
from lexical2html.serializer import EMPTY_DOCUMENT, serialize, serialize_editor_state
from lexical2html.text_content import TextStats, count_words, extract_text, text_stats

__all__ = [
    "EMPTY_DOCUMENT",
    "Alignment",
    "AlignmentMode",
    "DocumentShapeError",
    "EditorState",
    "Lexical2HtmlError",
    "RootNode",
    "SerializerOptions",
    "TextFormat",
    "TextStats",
    "alignment_style",
    "count_words",
    "emit_children",
    "emit_node",
    "extract_text",
    "load_editor_state",
    "resolve_alignment",
    "serialize",
    "serialize_editor_state",
    "text_stats",
    "wrap_inline",
]
