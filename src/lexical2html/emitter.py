"""Emit HTML fragments for individual document nodes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from lexical2html.formatting import (
    alignment_style,
    escape_attribute,
    resolve_alignment,
    wrap_inline,
)
from lexical2html.options import SerializerOptions
from lexical2html.schemas.nodes import (
    CodeNode,
    HeadingNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    QuoteNode,
    TextNode,
)

logger = logging.getLogger(__name__)

# Keeps a blank editor line visible once rendered.
EMPTY_PARAGRAPH = "<p><br></p>"


def emit_node(node: Any, *, options: SerializerOptions | None = None) -> str:
    """Emit the HTML fragment for one node and its descendants.

    Known node kinds dispatch on their model class. Anything else passes its
    children's content through, or yields ``""`` when it has none.
    """
    opts = options or SerializerOptions()
    return _emit(node, opts)


def emit_children(children: Iterable[Any], *, options: SerializerOptions | None = None) -> str:
    """Emit and concatenate fragments for a sequence of sibling nodes."""
    opts = options or SerializerOptions()
    return _emit_children(children, opts)


def _emit(node: Any, opts: SerializerOptions) -> str:
    emitter = _EMITTERS.get(type(node), _emit_passthrough)
    return emitter(node, opts)


def _emit_children(children: Iterable[Any], opts: SerializerOptions) -> str:
    return "".join(_emit(child, opts) for child in children)


def _emit_text(node: TextNode, opts: SerializerOptions) -> str:
    return wrap_inline(node.text, node.format, escape=opts.escape_text)


def _emit_linebreak(node: LineBreakNode, opts: SerializerOptions) -> str:
    return "<br>"


def _emit_paragraph(node: ParagraphNode, opts: SerializerOptions) -> str:
    content = _emit_children(node.children, opts)
    if not content:
        return EMPTY_PARAGRAPH
    style = alignment_style(resolve_alignment(node.format, mode=opts.alignment_mode))
    return f"<p{style}>{content}</p>"


def _emit_heading(node: HeadingNode, opts: SerializerOptions) -> str:
    content = _emit_children(node.children, opts)
    if not content:
        return ""
    return f"<{node.tag}>{content}</{node.tag}>"


def _emit_quote(node: QuoteNode, opts: SerializerOptions) -> str:
    return f"<blockquote>{_emit_children(node.children, opts)}</blockquote>"


def _emit_code(node: CodeNode, opts: SerializerOptions) -> str:
    return f"<pre><code>{_emit_children(node.children, opts)}</code></pre>"


def _emit_list(node: ListNode, opts: SerializerOptions) -> str:
    items = _emit_children(node.children, opts)
    if not items:
        return ""
    tag = "ul" if node.list_type == "bullet" else "ol"
    return f"<{tag}>{items}</{tag}>"


def _emit_list_item(node: ListItemNode, opts: SerializerOptions) -> str:
    return f"<li>{_emit_children(node.children, opts)}</li>"


def _emit_link(node: LinkNode, opts: SerializerOptions) -> str:
    content = _emit_children(node.children, opts)
    if not content:
        return ""
    href = escape_attribute(node.url, escape=opts.escape_text)
    title = ""
    if node.title:
        title = f' title="{escape_attribute(node.title, escape=opts.escape_text)}"'
    return f'<a href="{href}"{title}>{content}</a>'


def _emit_passthrough(node: Any, opts: SerializerOptions) -> str:
    children = getattr(node, "children", None)
    if not isinstance(children, (list, tuple)) or not children:
        return ""
    logger.debug("Passing through children of unhandled node kind %r", getattr(node, "type", None))
    return _emit_children(children, opts)


_EMITTERS: dict[type, Callable[[Any, SerializerOptions], str]] = {
    TextNode: _emit_text,
    LineBreakNode: _emit_linebreak,
    ParagraphNode: _emit_paragraph,
    HeadingNode: _emit_heading,
    QuoteNode: _emit_quote,
    CodeNode: _emit_code,
    ListNode: _emit_list,
    ListItemNode: _emit_list_item,
    LinkNode: _emit_link,
}
