"""Document tree models for serialized editor state.

Every node kind the editor emits has a frozen model whose ``type`` matches the
editor's wire tag. ``DocumentNode`` routes child payloads to those models by
tag; any tag it does not know lands in ``UnknownNode`` so newer editor nodes
still load and degrade to their children's content.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

# Element alignment as exported by the editor in string form.
ALIGNMENT_CODES = {
    "": 0,
    "left": 1,
    "center": 2,
    "right": 3,
    "justify": 4,
    "start": 5,
    "end": 6,
}

_UNKNOWN_TAG = "unknown"


def _coerce_bitmask(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return 0


def _coerce_alignment(value: Any) -> int:
    if isinstance(value, str):
        name = value.strip().lower()
        if name in ALIGNMENT_CODES:
            return ALIGNMENT_CODES[name]
    return _coerce_bitmask(value)


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class _ElementNode(_Node):
    children: list[DocumentNode] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def coerce_children(cls, value: Any) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        # Scalars in a child list carry no node shape; load them as empty unknown nodes.
        return [child if isinstance(child, (Mapping, BaseModel)) else {} for child in value]


class _AlignedElementNode(_ElementNode):
    format: int = 0

    @field_validator("format", mode="before")
    @classmethod
    def coerce_format(cls, value: Any) -> int:
        return _coerce_alignment(value)


class TextNode(_Node):
    """A run of text sharing one inline format bitmask."""

    type: Literal["text"] = "text"
    text: str = ""
    format: int = 0

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("format", mode="before")
    @classmethod
    def coerce_format(cls, value: Any) -> int:
        return _coerce_bitmask(value)


class LineBreakNode(_Node):
    """A soft line break inside a block."""

    type: Literal["linebreak"] = "linebreak"


class ParagraphNode(_AlignedElementNode):
    type: Literal["paragraph"] = "paragraph"


class QuoteNode(_AlignedElementNode):
    type: Literal["quote"] = "quote"


class CodeNode(_AlignedElementNode):
    type: Literal["code"] = "code"


class HeadingNode(_ElementNode):
    type: Literal["heading"] = "heading"
    tag: Literal["h1", "h2", "h3", "h4", "h5", "h6"] = "h1"

    @field_validator("tag", mode="before")
    @classmethod
    def coerce_tag(cls, value: Any) -> str:
        if isinstance(value, str) and value.strip().lower() in HEADING_TAGS:
            return value.strip().lower()
        return "h1"


class ListNode(_ElementNode):
    """A bullet or numbered list; only ``bullet`` renders unordered."""

    type: Literal["list"] = "list"
    list_type: str = Field("number", alias="listType")

    @field_validator("list_type", mode="before")
    @classmethod
    def coerce_list_type(cls, value: Any) -> str:
        if isinstance(value, str) and value:
            return value
        return "number"


class ListItemNode(_ElementNode):
    type: Literal["listitem"] = "listitem"


class LinkNode(_ElementNode):
    type: Literal["link"] = "link"
    url: str = "#"
    title: str | None = None

    @field_validator("url", mode="before")
    @classmethod
    def coerce_url(cls, value: Any) -> str:
        if value is None or value == "":
            return "#"
        return value if isinstance(value, str) else str(value)

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return value if isinstance(value, str) else str(value)


class UnknownNode(_ElementNode):
    """Any node kind without a dedicated model; keeps its tag and children."""

    type: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class RootNode(_ElementNode):
    """Top of the document; its children are the document's blocks."""

    type: str = "root"


_MODEL_BY_TAG: dict[str, type[BaseModel]] = {
    "text": TextNode,
    "linebreak": LineBreakNode,
    "paragraph": ParagraphNode,
    "heading": HeadingNode,
    "quote": QuoteNode,
    "code": CodeNode,
    "list": ListNode,
    "listitem": ListItemNode,
    "link": LinkNode,
}
_TAG_BY_MODEL = {model: tag for tag, model in _MODEL_BY_TAG.items()}


def _node_tag(value: Any) -> str:
    if isinstance(value, BaseModel):
        return _TAG_BY_MODEL.get(type(value), _UNKNOWN_TAG)
    tag = value.get("type") if isinstance(value, Mapping) else None
    if isinstance(tag, str) and tag in _MODEL_BY_TAG:
        return tag
    return _UNKNOWN_TAG


DocumentNode = Annotated[
    Union[
        Annotated[TextNode, Tag("text")],
        Annotated[LineBreakNode, Tag("linebreak")],
        Annotated[ParagraphNode, Tag("paragraph")],
        Annotated[HeadingNode, Tag("heading")],
        Annotated[QuoteNode, Tag("quote")],
        Annotated[CodeNode, Tag("code")],
        Annotated[ListNode, Tag("list")],
        Annotated[ListItemNode, Tag("listitem")],
        Annotated[LinkNode, Tag("link")],
        Annotated[UnknownNode, Tag(_UNKNOWN_TAG)],
    ],
    Discriminator(_node_tag),
]

KNOWN_NODE_MODELS: tuple[type[BaseModel], ...] = tuple(_MODEL_BY_TAG.values())

for _model in (
    ParagraphNode,
    QuoteNode,
    CodeNode,
    HeadingNode,
    ListNode,
    ListItemNode,
    LinkNode,
    UnknownNode,
    RootNode,
):
    _model.model_rebuild()
