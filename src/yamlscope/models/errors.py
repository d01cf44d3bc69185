"""Errors raised while binding an input source or reading its event stream."""

from __future__ import annotations

from yamlscope.models.events import Position


class InitializationError(Exception):
    """Raised when the parser cannot be created for an input source.

    Covers sources of an unsupported type, documents over the configured
    size limit, and failures constructing the underlying YAML engine.
    """


class ParseError(Exception):
    """Raised when the YAML engine rejects the input mid-stream.

    Carries the engine's problem description and, when the engine reported
    one, the position of the problem.  Terminal for the parser that raised it.
    """

    def __init__(self, problem: str, position: Position | None = None) -> None:
        self.problem = problem
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.position is None:
            return self.problem
        return (
            f"{self.problem} at line {self.position.line + 1}, "
            f"column {self.position.column}"
        )
