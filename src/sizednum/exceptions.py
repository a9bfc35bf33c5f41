"""
Exceptions raised by sizednum.

Everything derives from ``SizedNumberError`` (itself a ``ValueError``) so
callers can catch the whole family in one place.
"""

__all__ = [
    "ConfigurationError",
    "OutOfBoundsError",
    "SizedNumberError",
    "UnsupportedRepresentationError",
]


class SizedNumberError(ValueError):
    """Base exception for sizednum errors."""


class OutOfBoundsError(SizedNumberError):
    """Raised when a read or an offset extends past the end of the buffer.

    Attributes:
        offset: Offset the read started at
        requested: Number of bytes requested
        available: Number of bytes actually available from ``offset``
    """

    def __init__(self, offset: int, requested: int, available: int) -> None:
        super().__init__(
            f"out of bounds: need {requested} byte(s) at offset {offset}, {available} available"
        )
        self.offset = offset
        self.requested = requested
        self.available = available


class UnsupportedRepresentationError(SizedNumberError):
    """Raised when a number can't be shown or converted the way that was asked.

    Attributes:
        representation: Name of the requested representation (``"hex"``, ``"u64"``, ...)
        kind: Kind of the number that was rejected
    """

    def __init__(self, representation: str, kind: str) -> None:
        super().__init__(f"cannot represent {kind} value as {representation}")
        self.representation = representation
        self.kind = kind


class ConfigurationError(SizedNumberError):
    """Raised when configuration validation fails."""
