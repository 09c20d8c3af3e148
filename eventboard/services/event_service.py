"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

The service is the sole owner of the event collection. Every mutation builds
the next collection, writes it to the mirror, and only then swaps it in, so
memory and mirror never disagree once an operation returns or raises.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import datetime
from itertools import islice
from typing import Any

from django.utils import timezone

from eventboard.domain.errors import EventNotFoundError, ValidationError
from eventboard.domain.models import Comment, Event
from eventboard.domain.seed import seed_events
from eventboard.domain.value_objects import EventId
from eventboard.serializers import (
    CommentInputSerializer,
    EventInputSerializer,
    decode_events,
    encode_events,
    field_errors,
)
from eventboard.stores.interfaces import MirrorStore

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_IMAGE = "public/images/event-placeholder.jpg"


class EventService:
    """Service for event board operations."""

    def __init__(
        self,
        mirror: MirrorStore,
        *,
        placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
        seed: Callable[[], list[Event]] = seed_events,
        clock: Callable[[], datetime] = timezone.now,
        id_factory: Callable[[], EventId] = EventId.generate,
    ) -> None:
        self._mirror = mirror
        self._placeholder_image = placeholder_image
        self._seed = seed
        self._clock = clock
        self._id_factory = id_factory
        self._events: list[Event] | None = None

    # ---------- Hydration ----------

    def load(self) -> list[Event]:
        """Hydrate the collection from the mirror, seeding it if empty or corrupt.

        Raises:
            PersistenceError: If the mirror cannot be read, or the seed set
                cannot be written to it.
        """
        try:
            payload = self._mirror.read()
            events = None if payload is None else decode_events(payload)
        except ValueError:
            logger.warning(
                "Persisted events are corrupt, falling back to seed data",
                exc_info=True,
            )
            self._commit(self._seed())
            return list(self._events)

        if events is None:
            logger.info("No persisted events found, installing seed data")
            self._commit(self._seed())
        else:
            logger.info("Loaded %d events from mirror", len(events))
            self._events = events
        return list(self._events)

    # ---------- Reads ----------

    def list_events(self) -> list[Event]:
        """Return all events in storage order."""
        return list(self._collection())

    def find_by_id(self, event_id: str | EventId) -> Event | None:
        """Return the event with *event_id*, or None if there is none."""
        index = self._index_of(self._collection(), event_id)
        return None if index is None else self._events[index]

    def get_event(self, event_id: str | EventId) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self.find_by_id(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    def ranked_view(self, limit: int | None = None) -> Iterator[Event]:
        """Events by votes, highest first. Ties keep insertion order."""
        ranked = sorted(self._collection(), key=lambda event: event.votes.value, reverse=True)
        return islice(ranked, limit)

    def chronological_view(self, limit: int | None = None) -> Iterator[Event]:
        """Events by date, soonest first. Ties keep insertion order."""
        upcoming = sorted(self._collection(), key=lambda event: event.date)
        return islice(upcoming, limit)

    def comments_of(self, event_id: str | EventId) -> list[Comment]:
        """Return an event's comments, most recent first.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        ordered = sorted(
            enumerate(event.comments),
            key=lambda pair: (pair[1].date, pair[0]),
            reverse=True,
        )
        return [comment for _, comment in ordered]

    # ---------- Writes ----------

    def vote(self, event_id: str | EventId) -> int:
        """Add one vote to an event and return its new vote count.

        Raises:
            EventNotFoundError: If the event does not exist.
            PersistenceError: If the mirror cannot be written.
        """
        events = self._collection()
        index = self._require_index(events, event_id)
        updated = events[index].with_vote()
        self._commit(_replaced(events, index, updated))
        logger.info("Vote recorded for %r, now %d", updated.title, updated.votes.value)
        return updated.votes.value

    def add_comment(self, event_id: str | EventId, author: str, text: str) -> tuple[Comment, ...]:
        """Append a comment to an event and return its comments in storage order.

        Raises:
            EventNotFoundError: If the event does not exist.
            ValidationError: If author or text is empty after trimming.
            PersistenceError: If the mirror cannot be written.
        """
        events = self._collection()
        index = self._require_index(events, event_id)

        serializer = CommentInputSerializer(data={"author": author, "text": text})
        if not serializer.is_valid():
            raise ValidationError(field_errors(serializer.errors))

        comment = Comment(date=self._clock(), **serializer.validated_data)
        updated = events[index].with_comment(comment)
        self._commit(_replaced(events, index, updated))
        logger.info("Comment by %r added to %r", comment.author, updated.title)
        return updated.comments

    def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Validate *fields*, add a new event, and return it.

        Accepted keys: title, description, date, category, and image_url
        (or imageUrl). A blank image is replaced by the placeholder.

        Raises:
            ValidationError: With one entry per failing field.
            PersistenceError: If the mirror cannot be written.
        """
        serializer = EventInputSerializer(data=fields)
        if not serializer.is_valid():
            raise ValidationError(field_errors(serializer.errors))
        data = serializer.validated_data

        events = self._collection()
        event_id = self._id_factory()
        while self._index_of(events, event_id) is not None:
            event_id = self._id_factory()

        event = Event(
            id=event_id,
            title=data["title"],
            description=data["description"],
            category=data["category"],
            date=data["date"],
            image_url=data["image_url"] or self._placeholder_image,
        )
        self._commit(events + [event])
        logger.info("Created event %s (%r)", event.id, event.title)
        return event

    # ---------- Internals ----------

    def _collection(self) -> list[Event]:
        if self._events is None:
            self.load()
        return self._events

    def _commit(self, events: list[Event]) -> None:
        self._mirror.write(encode_events(events))
        self._events = events

    @staticmethod
    def _index_of(events: list[Event], event_id: str | EventId) -> int | None:
        wanted = str(event_id)
        for index, event in enumerate(events):
            if event.id.value == wanted:
                return index
        return None

    def _require_index(self, events: list[Event], event_id: str | EventId) -> int:
        index = self._index_of(events, event_id)
        if index is None:
            raise EventNotFoundError(str(event_id))
        return index


def _replaced(events: list[Event], index: int, event: Event) -> list[Event]:
    updated = list(events)
    updated[index] = event
    return updated
