"""Editor state envelope and loader."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from lexical2html.exceptions import DocumentShapeError
from lexical2html.schemas.nodes import RootNode


class EditorState(BaseModel):
    """Serialized editor state: ``{"root": {"type": "root", "children": [...]}}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    root: RootNode


def load_editor_state(data: EditorState | Mapping[str, Any] | str | bytes) -> EditorState:
    """Load an editor state from a mapping, JSON text, or an existing model.

    Args:
        data: The editor payload as submitted by the client.

    Returns:
        A validated, immutable ``EditorState``.

    Raises:
        DocumentShapeError: If the payload is not JSON, has no ``root`` object,
            or cannot be validated as a document tree.
    """
    if isinstance(data, EditorState):
        return data
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise DocumentShapeError(f"Editor state is not valid JSON: {exc}") from exc
    if not isinstance(data, Mapping) or not isinstance(data.get("root"), (Mapping, RootNode)):
        raise DocumentShapeError("Editor state must be an object with a 'root' object")
    try:
        return EditorState.model_validate(data)
    except ValidationError as exc:
        raise DocumentShapeError(f"Editor state failed validation: {exc}") from exc
