"""Serializers between domain models and their external shapes.

Two families live here:
- Record serializers map domain Event/Comment to the JSON records kept in
  the persisted mirror, and back.
- Input serializers enforce the field rules for user-supplied data.
"""

import json
from collections.abc import Mapping

from rest_framework import serializers

from eventboard.domain.models import Comment, Event
from eventboard.domain.value_objects import EventId, VoteCount


class CommentRecordSerializer(serializers.Serializer):
    """Serializer for the Comment domain model."""

    author = serializers.CharField(allow_blank=True, trim_whitespace=False)
    text = serializers.CharField(allow_blank=True, trim_whitespace=False)
    date = serializers.DateTimeField()

    def create(self, validated_data: dict) -> Comment:
        return Comment(**validated_data)


class EventRecordSerializer(serializers.Serializer):
    """Serializer for the Event domain model.

    Field names follow the stored JSON layout, so ``image_url`` travels as
    ``imageUrl``.
    """

    id = serializers.CharField()
    title = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    imageUrl = serializers.CharField(
        source="image_url", allow_blank=True, trim_whitespace=False
    )
    votes = serializers.IntegerField(min_value=0)
    category = serializers.CharField(allow_blank=True, trim_whitespace=False)
    date = serializers.DateField()
    comments = CommentRecordSerializer(many=True)

    def create(self, validated_data: dict) -> Event:
        comments = tuple(Comment(**item) for item in validated_data.pop("comments"))
        return Event(
            id=EventId.from_string(validated_data.pop("id")),
            votes=VoteCount(validated_data.pop("votes")),
            comments=comments,
            **validated_data,
        )


class CommentInputSerializer(serializers.Serializer):
    """Rules for a new comment. Both fields are trimmed and must be non-empty."""

    author = serializers.CharField()
    text = serializers.CharField()


class EventInputSerializer(serializers.Serializer):
    """Rules for a new event.

    All fields are checked before errors are reported, so a caller gets the
    full set of problems in one pass.
    """

    title = serializers.CharField(min_length=5, max_length=100)
    description = serializers.CharField(min_length=20)
    date = serializers.DateField()
    category = serializers.CharField()
    image_url = serializers.URLField(required=False, allow_blank=True, default="")

    def to_internal_value(self, data):
        if not isinstance(data, Mapping):
            return super().to_internal_value(data)
        data = dict(data)
        if "imageUrl" in data and "image_url" not in data:
            data["image_url"] = data.pop("imageUrl")
        # A blank date is a missing date, not a malformed one.
        if isinstance(data.get("date"), str) and not data["date"].strip():
            del data["date"]
        if data.get("image_url") is None:
            data.pop("image_url", None)
        return super().to_internal_value(data)


def field_errors(errors) -> dict[str, list[str]]:
    """Flatten serializer errors into ``{field: [message, ...]}``."""
    return {name: [str(message) for message in messages] for name, messages in errors.items()}


def encode_events(events: list[Event]) -> str:
    """Serialize the whole collection to the mirror's JSON payload."""
    return json.dumps(EventRecordSerializer(events, many=True).data, ensure_ascii=False)


def decode_events(payload: str) -> list[Event]:
    """Parse a mirror payload back into domain events.

    Raises:
        ValueError: If the payload is not JSON, is not a list of valid event
            records, or repeats an event id.
    """
    try:
        records = json.loads(payload)
    except RecursionError as exc:
        raise ValueError("Event records are nested too deeply") from exc
    serializer = EventRecordSerializer(data=records, many=True)
    if not serializer.is_valid():
        raise ValueError(f"Invalid event records: {serializer.errors}")
    events = serializer.save()

    seen: set[str] = set()
    for event in events:
        if event.id.value in seen:
            raise ValueError(f"Duplicate event id: {event.id.value}")
        seen.add(event.id.value)
    return events
