"""Error kinds surfaced by the review lifecycle.

Field-level problems are raised as Protean ``ValidationError``. Everything
else a caller must react to is a ``ReviewError`` tagged with an ``ErrorKind``
so that API adapters branch on ``error.kind`` instead of on exception classes.
"""

from enum import Enum


class ErrorKind(Enum):
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    UNAVAILABLE = "Unavailable"


class ReviewError(Exception):
    """A lifecycle failure carrying its kind and a client-safe message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"ReviewError({self.kind.value}, {self.message!r})"

    @classmethod
    def not_found(cls, message: str) -> "ReviewError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def forbidden(cls, message: str) -> "ReviewError":
        return cls(ErrorKind.FORBIDDEN, message)

    @classmethod
    def unavailable(cls, message: str) -> "ReviewError":
        return cls(ErrorKind.UNAVAILABLE, message)
