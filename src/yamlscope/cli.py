"""Command-line entry point: trace the YAML events of a document on stdin."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, TextIO

from yamlscope import __version__
from yamlscope.models.errors import InitializationError, ParseError
from yamlscope.parser.adapter import EventParser
from yamlscope.service.inspector import inspect_events
from yamlscope.settings import Settings

logger = logging.getLogger("yamlscope.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def run(
    stdin: BinaryIO,
    stdout: TextIO,
    stderr: TextIO,
    settings: Settings | None = None,
) -> int:
    """Read a document from *stdin*, write its event trace to *stdout*.

    Returns the process exit status.  Errors are reported on *stderr*; events
    rendered before a parse error are left on *stdout*.
    """
    if settings is None:
        settings = Settings()

    data = stdin.read()
    logger.debug("read %d bytes of input", len(data))

    try:
        parser = EventParser(data, max_document_size=settings.max_document_size)
    except InitializationError as exc:
        print(f"Error creating parser: {exc}", file=stderr)
        return EXIT_FAILURE

    with parser:
        try:
            count = inspect_events(parser, stdout)
        except ParseError as exc:
            stdout.flush()
            print(f"Parser error: {exc}", file=stderr)
            return EXIT_FAILURE

    logger.info("rendered %d events", count)
    return EXIT_OK


def main() -> None:
    """Run the inspector using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("yamlscope v%s starting", __version__)

    sys.exit(run(sys.stdin.buffer, sys.stdout, sys.stderr, settings))
