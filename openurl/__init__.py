"""Open configured URL templates with editor-context variables expanded."""

__version__ = "0.1.0"
