"""Builders for serialized editor payloads used across tests."""

from __future__ import annotations

from typing import Any


def text(value: str, fmt: int = 0) -> dict[str, Any]:
    """Build a serialized text node as the editor exports it."""
    return {
        "detail": 0,
        "format": fmt,
        "mode": "normal",
        "style": "",
        "text": value,
        "type": "text",
        "version": 1,
    }


def linebreak() -> dict[str, Any]:
    return {"type": "linebreak", "version": 1}


def element(node_type: str, children: list[dict[str, Any]], **attrs: Any) -> dict[str, Any]:
    """Build a serialized element node as the editor exports it."""
    node: dict[str, Any] = {
        "children": children,
        "direction": "ltr",
        "format": "",
        "indent": 0,
        "type": node_type,
        "version": 1,
    }
    node.update(attrs)
    return node


def editor_state(*blocks: dict[str, Any]) -> dict[str, Any]:
    """Wrap blocks in the fixed editor state envelope."""
    return {"root": element("root", list(blocks))}
