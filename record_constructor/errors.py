"""Error types raised by the record constructor.

Every failure is a ``RecordError`` tagged with an ``ErrorKind`` so callers
can branch on the kind instead of matching message text.
"""

import enum


class ErrorKind(str, enum.Enum):
    """Category of a construction failure."""

    INVALID_INPUT = "invalid_input"
    PARSE_ERROR = "parse_error"


class RecordError(ValueError):
    """Raised when a name/age pair cannot be turned into a ``Record``.

    Attributes:
        kind: The category of the failure.
        message: Human-readable description, reported verbatim to the user.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind: ErrorKind = kind
        self.message: str = message

    def __repr__(self) -> str:
        return f"RecordError(kind={self.kind.value!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordError):
            return NotImplemented
        return (self.kind, self.message) == (other.kind, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.message))
