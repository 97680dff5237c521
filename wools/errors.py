"""
errors.py

Exceptions raised when parsing words, hints and dictionaries at the boundary.
The core (feedback, constraints, matcher) never raises on well-formed input.
"""


class WoolsError(ValueError):
    """Base class for module errors."""
    pass


class InvalidWordError(WoolsError):
    """Provided word illegal (wrong length or invalid characters)."""
    pass


class InvalidHintsError(WoolsError):
    """Provided hints illegal (wrong length or unknown symbols)."""
    pass


class InvalidTokenError(WoolsError):
    """Combined guess/hints token is missing its separator or has too many."""
    pass


class DictionaryError(WoolsError):
    """Dictionary could not be read or holds no valid words."""
    pass
