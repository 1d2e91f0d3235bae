"""Test setup for lexical2html."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from node_builders import editor_state, element, linebreak, text  # noqa: E402


@pytest.fixture
def sample_state() -> dict[str, Any]:
    """An article body touching every node kind the editor produces."""
    return editor_state(
        element("heading", [text("Launch notes")], tag="h2"),
        element(
            "paragraph",
            [
                text("Read "),
                element("link", [text("the docs", 1)], url="https://example.com/docs", rel="noreferrer"),
                text(" first."),
            ],
            format="center",
        ),
        element(
            "list",
            [element("listitem", [text("One")], value=1), element("listitem", [text("Two")], value=2)],
            listType="number",
            start=1,
            tag="ol",
        ),
        element("quote", [text("Ship it."), linebreak(), text("- the team")]),
        element("code", [text("x = 1")], language="python"),
        element("paragraph", []),
    )
