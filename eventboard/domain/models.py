"""Domain models representing persisted state.

These are pure domain objects with no input rules. Field validation for
user-supplied data lives in eventboard/serializers.py; the Django model for
the persisted mirror is in eventboard/models.py.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime

from eventboard.domain.value_objects import EventId, VoteCount


@dataclass(frozen=True)
class Comment:
    """Domain representation of a Comment on an Event."""

    author: str
    text: str
    date: datetime


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    category: str
    date: date
    image_url: str
    votes: VoteCount = VoteCount()
    comments: tuple[Comment, ...] = ()

    def with_vote(self) -> "Event":
        """Return a copy of this event with one more vote."""
        return replace(self, votes=self.votes.increment())

    def with_comment(self, comment: Comment) -> "Event":
        """Return a copy of this event with *comment* appended."""
        return replace(self, comments=self.comments + (comment,))
