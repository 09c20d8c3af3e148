from eventboard.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    PersistenceError,
    ValidationError,
)
from eventboard.domain.models import Comment, Event
from eventboard.domain.value_objects import EventId, VoteCount

__all__ = [
    "Event",
    "Comment",
    "EventId",
    "VoteCount",
    "DomainError",
    "ErrorCode",
    "EventNotFoundError",
    "ValidationError",
    "PersistenceError",
]
