"""Shared test fixtures for yamlscope."""

from __future__ import annotations

import pytest

from yamlscope.models.events import Event
from yamlscope.parser.adapter import EventParser
from yamlscope.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the caller's environment."""
    return Settings(_env_file=None, log_level="WARNING", max_document_size=5_000_000)


def parse_all(source: str | bytes) -> list[Event]:
    """Parse *source* to completion and return every event."""
    with EventParser(source) as parser:
        return list(parser)


SIMPLE_MAPPING_YAML = "a: 1\n"

COMMENTED_YAML = "# hi\nfoo: bar\n"

ANCHOR_YAML = "- &a 1\n- *a\n"

UNTERMINATED_YAML = 'key: "unterminated\n'

SAMPLE_DOCUMENT_YAML = """\
name: inventory
version: 2
owner: &owner
  team: platform
  contact: 'ops@example.com'
items:
  - id: 1
    tags: [red, blue]
    note: |
      first line
      second line
  - id: 2
    attrs: {size: large}
    owner: *owner
    summary: >
      folded
      text
    label: !custom widget
    quoted: "double"
"""
