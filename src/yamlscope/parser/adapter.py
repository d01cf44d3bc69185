"""Pull-based event parser built on ruamel.yaml's round-trip parser."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from types import TracebackType
from typing import IO, Any

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.events import (
    AliasEvent,
    DocumentEndEvent,
    DocumentStartEvent,
    MappingEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceEndEvent,
    SequenceStartEvent,
    StreamEndEvent,
    StreamStartEvent,
)

from yamlscope.models.errors import InitializationError, ParseError
from yamlscope.models.events import (
    COLLECTION_START_KINDS,
    END_KINDS,
    CollectionStyle,
    Event,
    EventKind,
    Position,
    ScalarStyle,
)
from yamlscope.parser.comments import split_comments

# ---------------------------------------------------------------------------
# Engine vocabulary
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters (or bytes)

_KIND_BY_EVENT: dict[type, EventKind] = {
    StreamStartEvent: EventKind.STREAM_START,
    StreamEndEvent: EventKind.STREAM_END,
    DocumentStartEvent: EventKind.DOCUMENT_START,
    DocumentEndEvent: EventKind.DOCUMENT_END,
    AliasEvent: EventKind.ALIAS,
    ScalarEvent: EventKind.SCALAR,
    SequenceStartEvent: EventKind.SEQUENCE_START,
    SequenceEndEvent: EventKind.SEQUENCE_END,
    MappingStartEvent: EventKind.MAPPING_START,
    MappingEndEvent: EventKind.MAPPING_END,
}

# ruamel.yaml reports plain scalars with no style character.
_SCALAR_STYLES: dict[str | None, ScalarStyle] = {
    None: ScalarStyle.PLAIN,
    "": ScalarStyle.PLAIN,
    "'": ScalarStyle.SINGLE_QUOTED,
    '"': ScalarStyle.DOUBLE_QUOTED,
    "|": ScalarStyle.LITERAL,
    ">": ScalarStyle.FOLDED,
}

_COLLECTION_STYLES: dict[bool | None, CollectionStyle] = {
    True: CollectionStyle.FLOW,
    False: CollectionStyle.BLOCK,
    None: CollectionStyle.ANY,
}

YAMLSource = str | bytes | IO[str] | IO[bytes]


def _position(mark: Any) -> Position:
    if mark is None:
        return Position()
    return Position(offset=mark.index, line=mark.line, column=mark.column)


def _text(value: Any) -> str:
    """Copy an engine string (or tag/anchor object) into a plain ``str``."""
    if value is None:
        return ""
    return str(getattr(value, "value", value))


def _plain_implicit(implicit: Any) -> bool:
    # Scalars carry a (plain, quoted) pair; collections a single flag.
    if isinstance(implicit, (tuple, list)):
        return bool(implicit[0]) if implicit else False
    return bool(implicit)


def _scalar_style(style: Any) -> ScalarStyle:
    return _SCALAR_STYLES.get(style, ScalarStyle.ANY)


def _collection_style(flow_style: Any) -> CollectionStyle:
    return _COLLECTION_STYLES.get(flow_style, CollectionStyle.ANY)


def _translate(raw: Any) -> Event:
    """Build a public ``Event`` from one ruamel.yaml event."""
    kind = _KIND_BY_EVENT.get(type(raw), EventKind.NONE)
    slots = split_comments(getattr(raw, "comment", None), closing=kind in END_KINDS)

    fields: dict[str, Any] = {}
    if kind in (EventKind.DOCUMENT_START, EventKind.DOCUMENT_END):
        fields["implicit"] = not raw.explicit
    elif kind == EventKind.ALIAS:
        fields["anchor"] = _text(raw.anchor)
    elif kind == EventKind.SCALAR:
        value = _text(raw.value)
        if raw.style == ">":
            # ruamel marks fold points in folded scalars with BEL
            value = value.replace("\a", "")
        fields["value"] = value
        fields["anchor"] = _text(raw.anchor)
        fields["tag"] = _text(raw.tag)
        fields["implicit"] = _plain_implicit(raw.implicit)
        fields["style"] = _scalar_style(raw.style)
    elif kind in COLLECTION_START_KINDS:
        fields["anchor"] = _text(raw.anchor)
        fields["tag"] = _text(raw.tag)
        fields["implicit"] = bool(raw.implicit)
        fields["style"] = _collection_style(raw.flow_style)

    return Event(
        kind=kind,
        start=_position(getattr(raw, "start_mark", None)),
        end=_position(getattr(raw, "end_mark", None)),
        head_comment=slots.head,
        line_comment=slots.line,
        foot_comment=slots.foot,
        tail_comment=slots.tail,
        **fields,
    )


def _parse_error(exc: YAMLError) -> ParseError:
    if isinstance(exc, MarkedYAMLError) and exc.problem:
        problem = exc.problem
        if exc.context:
            problem = f"{exc.context}: {problem}"
        mark = exc.problem_mark or exc.context_mark
        return ParseError(problem, _position(mark) if mark is not None else None)
    return ParseError(str(exc).strip() or type(exc).__name__)


# ---------------------------------------------------------------------------
# EventParser
# ---------------------------------------------------------------------------


class EventParser:
    """Single-use parser yielding normalized events one call at a time.

    Owns a ruamel.yaml engine for its whole lifetime; release it with
    :meth:`close` or by using the parser as a context manager.  ``next()``
    returns ``None`` once the stream is exhausted and keeps doing so.
    """

    def __init__(
        self, source: YAMLSource, *, max_document_size: int = _MAX_DOCUMENT_SIZE
    ) -> None:
        if isinstance(source, (str, bytes)):
            if max_document_size and len(source) > max_document_size:
                raise InitializationError(
                    f"YAML document exceeds maximum size "
                    f"({len(source):,} > {max_document_size:,} limit)"
                )
        elif not callable(getattr(source, "read", None)):
            raise InitializationError(
                f"cannot read YAML from a {type(source).__name__} source"
            )

        try:
            self._yaml = YAML(typ="rt")
        except Exception as exc:
            raise InitializationError(f"failed to initialize YAML parser: {exc}") from exc

        # The generator builds the engine lazily and disposes of it when closed.
        self._events: Generator[Any, None, None] = self._yaml.parse(source)
        self._done = False
        self._closed = False
        self._error: ParseError | None = None

    # -- stream ---------------------------------------------------------------

    def next(self) -> Event | None:
        """Return the next event, or ``None`` when the stream is complete.

        Raises ``ParseError`` when the engine rejects the input; the same
        error is raised again on any later call.
        """
        if self._closed:
            raise ValueError("parser is closed")
        if self._error is not None:
            raise self._error
        if self._done:
            return None

        try:
            raw = next(self._events)
        except StopIteration:
            self._done = True
            return None
        except YAMLError as exc:
            self._error = _parse_error(exc)
            raise self._error from exc

        event = _translate(raw)
        if event.kind == EventKind.STREAM_END:
            self._done = True
        return event

    def __iter__(self) -> Iterator[Event]:
        while (event := self.next()) is not None:
            yield event

    @property
    def done(self) -> bool:
        return self._done

    # -- lifecycle ------------------------------------------------------------

    def close(self) -> None:
        """Release the engine.  Further calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._events.close()

    def __enter__(self) -> EventParser:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
