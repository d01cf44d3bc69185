"""Public event vocabulary: kinds, node styles, source positions and events."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, model_validator


class EventKind(StrEnum):
    """Kind of a parser event, roughly in stream lifecycle order.

    ``NONE`` marks an event the engine produced but which has no public kind.
    """

    NONE = "NONE"
    STREAM_START = "STREAM-START"
    STREAM_END = "STREAM-END"
    DOCUMENT_START = "DOCUMENT-START"
    DOCUMENT_END = "DOCUMENT-END"
    ALIAS = "ALIAS"
    SCALAR = "SCALAR"
    SEQUENCE_START = "SEQUENCE-START"
    SEQUENCE_END = "SEQUENCE-END"
    MAPPING_START = "MAPPING-START"
    MAPPING_END = "MAPPING-END"


class ScalarStyle(StrEnum):
    ANY = "any"
    PLAIN = "plain"
    SINGLE_QUOTED = "single-quoted"
    DOUBLE_QUOTED = "double-quoted"
    LITERAL = "literal"
    FOLDED = "folded"


class CollectionStyle(StrEnum):
    ANY = "any"
    BLOCK = "block"
    FLOW = "flow"


COLLECTION_START_KINDS = frozenset({EventKind.SEQUENCE_START, EventKind.MAPPING_START})
END_KINDS = frozenset(
    {
        EventKind.STREAM_END,
        EventKind.DOCUMENT_END,
        EventKind.SEQUENCE_END,
        EventKind.MAPPING_END,
    }
)
IMPLICIT_KINDS = frozenset(
    {
        EventKind.DOCUMENT_START,
        EventKind.DOCUMENT_END,
        EventKind.SCALAR,
        EventKind.SEQUENCE_START,
        EventKind.MAPPING_START,
    }
)


class Position(BaseModel):
    """A point in the source text.  ``line`` and ``column`` are 0-based."""

    offset: int = Field(0, ge=0)
    line: int = Field(0, ge=0)
    column: int = Field(0, ge=0)

    model_config = {"frozen": True}


class Event(BaseModel):
    """One normalized parser event.

    Which payload fields carry information depends on ``kind``; the others
    keep their defaults.  Comment slots are ``None`` when the engine attached
    nothing and ``b""`` when it attached an empty comment.
    """

    kind: EventKind
    value: str = ""
    anchor: str = ""
    tag: str = ""
    style: ScalarStyle | CollectionStyle | None = None
    implicit: bool = False
    start: Position = Position()
    end: Position = Position()
    head_comment: bytes | None = None
    line_comment: bytes | None = None
    foot_comment: bytes | None = None
    tail_comment: bytes | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_style_matches_kind(self) -> Event:
        if self.style is None:
            return self
        if self.kind == EventKind.SCALAR:
            if not isinstance(self.style, ScalarStyle):
                raise ValueError(f"scalar events take a ScalarStyle, got {self.style!r}")
        elif self.kind in COLLECTION_START_KINDS:
            if not isinstance(self.style, CollectionStyle):
                raise ValueError(
                    f"{self.kind} events take a CollectionStyle, got {self.style!r}"
                )
        else:
            raise ValueError(f"{self.kind} events carry no style")
        return self

    @property
    def style_name(self) -> str:
        return style_name(self)


def style_name(event: Event) -> str:
    """Resolve the display name of an event's style.

    Scalars resolve to one of the ``ScalarStyle`` names, sequence and mapping
    starts to one of the ``CollectionStyle`` names (``any`` when the style was
    left unspecified).  Every other kind resolves to ``""``.
    """
    if event.kind == EventKind.SCALAR:
        return str(event.style) if isinstance(event.style, ScalarStyle) else ScalarStyle.ANY.value
    if event.kind in COLLECTION_START_KINDS:
        if isinstance(event.style, CollectionStyle):
            return str(event.style)
        return CollectionStyle.ANY.value
    return ""
