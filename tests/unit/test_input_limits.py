"""Tests for input binding checks in EventParser."""

from __future__ import annotations

import io

import pytest

from yamlscope.models.errors import InitializationError
from yamlscope.models.events import EventKind
from yamlscope.parser.adapter import _MAX_DOCUMENT_SIZE, EventParser


class TestDocumentSize:
    """Reject oversized in-memory documents before the engine sees them."""

    def test_oversized_document_rejected(self) -> None:
        yaml = "key: " + "x" * (_MAX_DOCUMENT_SIZE + 1) + "\n"
        with pytest.raises(InitializationError, match="maximum size"):
            EventParser(yaml)

    def test_oversized_bytes_rejected(self) -> None:
        with pytest.raises(InitializationError, match="maximum size"):
            EventParser(b"key: value\n", max_document_size=4)

    def test_just_under_limit_passes(self) -> None:
        yaml = "key: value\n"
        with EventParser(yaml, max_document_size=len(yaml)) as parser:
            assert parser.next().kind == EventKind.STREAM_START

    def test_zero_disables_limit(self) -> None:
        with EventParser("key: value\n", max_document_size=0) as parser:
            assert len(list(parser)) == 8


class TestSourceTypes:
    def test_text_stream_accepted(self) -> None:
        with EventParser(io.StringIO("- 1\n")) as parser:
            assert [e.kind for e in parser][-1] == EventKind.STREAM_END

    def test_binary_stream_accepted(self) -> None:
        with EventParser(io.BytesIO(b"- 1\n")) as parser:
            assert [e.kind for e in parser][-1] == EventKind.STREAM_END

    @pytest.mark.parametrize("source", [None, 3.5, ["a: 1"], {"a": 1}])
    def test_unreadable_sources_rejected(self, source: object) -> None:
        with pytest.raises(InitializationError):
            EventParser(source)  # type: ignore[arg-type]
