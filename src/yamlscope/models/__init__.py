"""Pydantic event model and error types for yamlscope."""

from yamlscope.models.errors import InitializationError, ParseError
from yamlscope.models.events import (
    CollectionStyle,
    Event,
    EventKind,
    Position,
    ScalarStyle,
    style_name,
)

__all__ = [
    "CollectionStyle",
    "Event",
    "EventKind",
    "InitializationError",
    "ParseError",
    "Position",
    "ScalarStyle",
    "style_name",
]
