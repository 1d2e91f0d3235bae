"""Serialization options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lexical2html.config import LEXICAL2HTML_ALIGNMENT_MODE, LEXICAL2HTML_ESCAPE_TEXT
from lexical2html.formatting import AlignmentMode

logger = logging.getLogger(__name__)


def _default_alignment_mode() -> AlignmentMode:
    try:
        return AlignmentMode(LEXICAL2HTML_ALIGNMENT_MODE)
    except ValueError:
        logger.warning(
            "Unknown alignment mode %r; using %r",
            LEXICAL2HTML_ALIGNMENT_MODE,
            AlignmentMode.EXACT.value,
        )
        return AlignmentMode.EXACT


@dataclass(frozen=True)
class SerializerOptions:
    """Options for document serialization.

    Attributes:
        alignment_mode: How paragraph alignment codes are decoded.
        escape_text: If True, escape text content and attribute values. If
            False, text is inserted verbatim as the legacy article form did.
    """

    alignment_mode: AlignmentMode = field(default_factory=_default_alignment_mode)
    escape_text: bool = LEXICAL2HTML_ESCAPE_TEXT
