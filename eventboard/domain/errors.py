"""Domain error codes for the eventboard module."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class ValidationError(DomainError):
    """Raised when one or more input fields fail their rules.

    ``field_errors`` maps every failing field to its messages, so callers can
    report all problems at once.
    """

    def __init__(self, field_errors: Mapping[str, list[str]]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Invalid fields: " + ", ".join(sorted(field_errors)),
        )
        object.__setattr__(
            self,
            "field_errors",
            {name: list(messages) for name, messages in field_errors.items()},
        )


class PersistenceError(DomainError):
    """Raised when the persisted mirror cannot be read or written."""

    def __init__(self, detail: str = "Could not save events") -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILED,
            message=detail,
        )
