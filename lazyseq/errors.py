"""
Error kinds raised at the library boundary.

Out-of-range indexes raise the built-in ``IndexError`` and bad arguments the
built-in ``ValueError`` (or ``TypeError`` for a missing callable/source). The
two kinds Python has no built-in for are defined here as subclasses of the
closest built-in, so callers may catch either.
"""


class NoSuchElementError(LookupError):
    """Raised by ``next()`` on an exhausted pull iterator."""


class UnsupportedOperationError(TypeError):
    """Raised when an iterator, view or pipeline does not support an operation."""
