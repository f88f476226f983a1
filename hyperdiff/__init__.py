"""hyperdiff - line-level diff engine for code review."""

__version__ = "0.1.0"
