"""yamlscope: position-annotated YAML parser event traces."""

__version__ = "0.1.0"
