"""Render parser events as a readable, line-oriented trace."""

from __future__ import annotations

import json
from typing import TextIO

from yamlscope.models.events import (
    COLLECTION_START_KINDS,
    IMPLICIT_KINDS,
    CollectionStyle,
    Event,
    EventKind,
    ScalarStyle,
)
from yamlscope.parser.adapter import EventParser

_COMMENT_FIELDS = (
    ("HeadComment", "head_comment"),
    ("LineComment", "line_comment"),
    ("FootComment", "foot_comment"),
    ("TailComment", "tail_comment"),
)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _node_properties(event: Event) -> list[str]:
    lines = []
    if event.tag:
        lines.append(f"  Tag: {event.tag}")
    if event.anchor:
        lines.append(f"  Anchor: {event.anchor}")
    return lines


def render_event(event: Event) -> str:
    """Render one event as a block of lines followed by a blank line.

    Lines are displayed 1-based, columns 0-based.  Styles are only shown when
    they differ from the default for the node kind (``plain`` for scalars,
    ``block`` for sequences and mappings).
    """
    lines = [
        f"- Event: {event.kind}",
        f"  Start: {{Line: {event.start.line + 1}, Column: {event.start.column}}}",
        f"  End: {{Line: {event.end.line + 1}, Column: {event.end.column}}}",
    ]

    for label, attr in _COMMENT_FIELDS:
        comment: bytes | None = getattr(event, attr)
        if comment:
            lines.append(f"  {label}: {_quote(comment.decode('utf-8', errors='replace'))}")

    style = event.style_name
    if event.kind == EventKind.SCALAR:
        lines.append(f"  Value: {_quote(event.value)}")
        if style and style != ScalarStyle.PLAIN:
            lines.append(f"  Style: {style}")
        lines.extend(_node_properties(event))
    elif event.kind == EventKind.ALIAS:
        lines.append(f"  Anchor: {event.anchor}")
    elif event.kind in COLLECTION_START_KINDS:
        if style and style != CollectionStyle.BLOCK:
            lines.append(f"  Style: {style}")
        lines.extend(_node_properties(event))

    if event.kind in IMPLICIT_KINDS:
        lines.append(f"  Implicit: {_flag(event.implicit)}")

    return "\n".join(lines) + "\n\n"


def inspect_events(parser: EventParser, out: TextIO) -> int:
    """Write every remaining event of *parser* to *out*.

    Returns the number of events rendered.  ``ParseError`` propagates to the
    caller; whatever was written before it stays written.
    """
    count = 0
    while (event := parser.next()) is not None:
        out.write(render_event(event))
        count += 1
    return count
