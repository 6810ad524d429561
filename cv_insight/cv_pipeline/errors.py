"""Errors raised by the CV pipeline."""


class InvalidInputError(ValueError):
    """CV text is missing, not a string, or whitespace only."""
