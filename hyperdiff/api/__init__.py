"""API module for hyperdiff.

Functions defined here are the single source of truth for the CLI and for
embedding applications.
"""

__all__ = []
