"""Local configuration for lexical2html."""

from __future__ import annotations

import os


DEFAULT_ALIGNMENT_MODE = "exact"
DEFAULT_ESCAPE_TEXT = "true"

_TRUTHY = {"1", "true", "yes", "on"}

# "exact" decodes alignment codes by equality; "legacy" reproduces previously stored output.
LEXICAL2HTML_ALIGNMENT_MODE = os.getenv("LEXICAL2HTML_ALIGNMENT_MODE", DEFAULT_ALIGNMENT_MODE).strip().lower()
LEXICAL2HTML_ESCAPE_TEXT = os.getenv("LEXICAL2HTML_ESCAPE_TEXT", DEFAULT_ESCAPE_TEXT).strip().lower() in _TRUTHY
