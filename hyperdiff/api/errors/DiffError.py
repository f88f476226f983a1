"""Base diff engine error."""


class DiffError(Exception):
    """Base class for every error raised by the diff engine."""
