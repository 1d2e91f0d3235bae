"""Serialize an editor document tree into article HTML."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lexical2html.emitter import emit_node
from lexical2html.exceptions import DocumentShapeError
from lexical2html.options import SerializerOptions
from lexical2html.schemas import EditorState, RootNode, load_editor_state

logger = logging.getLogger(__name__)

# Stored for a document with no renderable content.
EMPTY_DOCUMENT = "<p></p>"


def serialize(root: RootNode | None, *, options: SerializerOptions | None = None) -> str:
    """Serialize a document root into newline-joined HTML fragments.

    Top-level nodes that emit nothing (an empty heading, an empty list) are
    dropped rather than leaving a blank line. A missing or empty root, or one
    whose blocks all emit nothing, yields ``EMPTY_DOCUMENT``.

    Parameters
    ----------
    root : RootNode | None
        The document root supplied by the editor.
    options : SerializerOptions | None
        Alignment and escaping options. Uses defaults if None.
    """
    children = getattr(root, "children", None)
    if not isinstance(children, (list, tuple)) or not children:
        return EMPTY_DOCUMENT

    opts = options or SerializerOptions()
    fragments = [emit_node(child, options=opts) for child in children]
    html = "\n".join(fragment for fragment in fragments if fragment)
    logger.debug(
        "Serialized %d top-level nodes into %d characters", len(fragments), len(html)
    )
    return html or EMPTY_DOCUMENT


def serialize_editor_state(
    state: EditorState | Mapping[str, Any] | str | bytes | None,
    *,
    options: SerializerOptions | None = None,
) -> str:
    """Serialize a raw editor payload as submitted with an article.

    Malformed payloads never raise: they are logged and produce
    ``EMPTY_DOCUMENT`` so a partially filled draft can still be saved.
    """
    if state is None:
        return EMPTY_DOCUMENT
    try:
        editor_state = load_editor_state(state)
    except DocumentShapeError as exc:
        logger.warning("Falling back to an empty document: %s", exc)
        return EMPTY_DOCUMENT
    return serialize(editor_state.root, options=options)
