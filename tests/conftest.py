"""Pytest configuration and shared fixtures."""

import pytest

from eventboard.domain.errors import PersistenceError
from eventboard.services import reset_event_service
from eventboard.services.event_service import EventService
from eventboard.stores import InMemoryMirrorStore


class FlakyMirrorStore(InMemoryMirrorStore):
    """In-memory mirror whose writes can be switched off."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False
        self.writes = 0

    def write(self, payload: str) -> None:
        if self.fail_writes:
            raise PersistenceError()
        self.writes += 1
        super().write(payload)


@pytest.fixture
def mirror() -> FlakyMirrorStore:
    return FlakyMirrorStore()


@pytest.fixture
def service(mirror: FlakyMirrorStore) -> EventService:
    return EventService(mirror)


@pytest.fixture
def valid_fields() -> dict[str, str]:
    return {
        "title": "Python Meetup",
        "description": "An evening of short talks about packaging and testing.",
        "date": "2026-11-20",
        "category": "technology",
        "image_url": "https://example.com/meetup.jpg",
    }


@pytest.fixture(autouse=True)
def fresh_event_service():
    reset_event_service()
    yield
    reset_event_service()
