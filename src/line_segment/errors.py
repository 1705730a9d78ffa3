"""Exceptions raised by line segment construction and point generation."""


class ValidationError(ValueError):
    """Raised when a segment or point configuration is invalid."""
