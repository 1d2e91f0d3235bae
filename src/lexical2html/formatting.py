"""Decode inline format bitmasks and block alignment codes."""

from __future__ import annotations

import enum
import html


class TextFormat(enum.IntFlag):
    """Inline style bits carried by a text node's ``format``."""

    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    STRIKETHROUGH = 8
    CODE = 16
    SUBSCRIPT = 32
    SUPERSCRIPT = 64


# Application order; each later tag wraps the earlier ones.
INLINE_TAGS: tuple[tuple[TextFormat, str], ...] = (
    (TextFormat.BOLD, "strong"),
    (TextFormat.ITALIC, "em"),
    (TextFormat.UNDERLINE, "u"),
    (TextFormat.STRIKETHROUGH, "s"),
    (TextFormat.CODE, "code"),
    (TextFormat.SUBSCRIPT, "sub"),
    (TextFormat.SUPERSCRIPT, "sup"),
)


class Alignment(str, enum.Enum):
    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class AlignmentMode(str, enum.Enum):
    """How alignment codes are decoded.

    ``EXACT`` maps each code by equality. ``LEGACY`` reproduces the output of
    the legacy article form, which ran four independent ``code & n``
    tests (n = 1, 2, 3, 4) and kept the last one that matched.
    """

    EXACT = "exact"
    LEGACY = "legacy"


_EXACT_ALIGNMENT = {
    1: Alignment.LEFT,
    2: Alignment.CENTER,
    3: Alignment.RIGHT,
    4: Alignment.JUSTIFY,
}

_LEGACY_ALIGNMENT_TESTS = (
    (1, Alignment.LEFT),
    (2, Alignment.CENTER),
    (3, Alignment.RIGHT),
    (4, Alignment.JUSTIFY),
)


def wrap_inline(text: str, fmt: int, *, escape: bool = True) -> str:
    """Wrap text in the inline tags selected by a format bitmask.

    Unset bits add nothing and bits above ``SUPERSCRIPT`` are ignored.
    """
    content = html.escape(text, quote=False) if escape else text
    for flag, tag in INLINE_TAGS:
        if fmt & flag:
            content = f"<{tag}>{content}</{tag}>"
    return content


def resolve_alignment(fmt: int, *, mode: AlignmentMode | str = AlignmentMode.EXACT) -> Alignment:
    """Resolve a block alignment code to an ``Alignment``."""
    if AlignmentMode(mode) is AlignmentMode.LEGACY:
        alignment = Alignment.NONE
        for mask, candidate in _LEGACY_ALIGNMENT_TESTS:
            if fmt & mask:
                alignment = candidate
        return alignment
    return _EXACT_ALIGNMENT.get(fmt, Alignment.NONE)


def alignment_style(alignment: Alignment) -> str:
    """Return the ``style`` attribute for an alignment, or ``""`` for none."""
    if alignment is Alignment.NONE:
        return ""
    return f' style="text-align: {alignment.value};"'


def escape_attribute(value: str, *, escape: bool = True) -> str:
    return html.escape(value, quote=True) if escape else value
