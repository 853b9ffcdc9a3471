"""
errors.py

The two failure modes of the solver engine.
"""


class InvalidDictionary(ValueError):
    """Raised when the words handed to the solver are not uniform-length A-Z strings."""


class InvalidFormat(ValueError):
    """Raised when an outcome string is not exactly L characters from {x, y, g}."""
