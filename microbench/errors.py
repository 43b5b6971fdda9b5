"""Custom exceptions for microbench."""

from __future__ import annotations


class MicrobenchError(Exception):
    """Base class for microbench exceptions."""


class PreconditionError(AssertionError, MicrobenchError):
    """Raised when a caller breaks a documented precondition.

    This always indicates a programming error in the calling code (e.g. an
    iteration count that does not match the recorded timing matrix), never an
    environmental condition.
    """


__all__ = [
    "MicrobenchError",
    "PreconditionError",
]
