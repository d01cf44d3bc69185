"""YAML event parsing on top of the ruamel.yaml engine."""

from yamlscope.parser.adapter import EventParser
from yamlscope.parser.comments import CommentSlots, split_comments

__all__ = [
    "CommentSlots",
    "EventParser",
    "split_comments",
]
