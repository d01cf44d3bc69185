"""Event trace rendering."""

from yamlscope.service.inspector import inspect_events, render_event

__all__ = ["inspect_events", "render_event"]
