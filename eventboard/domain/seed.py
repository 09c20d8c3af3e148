"""Example events installed when no persisted mirror exists yet."""

from datetime import date, datetime, timezone

from eventboard.domain.models import Comment, Event
from eventboard.domain.value_objects import EventId, VoteCount


def _utc(year: int, month: int, day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def seed_events() -> list[Event]:
    """Return a fresh copy of the seed collection."""
    return [
        Event(
            id=EventId("1"),
            title="Artificial Intelligence Conference 2025",
            description=(
                "Exploring the latest advances in artificial intelligence, machine "
                "learning and the future of automation. Join industry experts."
            ),
            category="technology",
            date=date(2025, 7, 15),
            image_url="PROYECTO/Imagenes/Conferencia_ai.jpg",
            votes=VoteCount(120),
            comments=(
                Comment(
                    author="Juan Perez",
                    text="Really excited about this conference!",
                    date=_utc(2025, 5, 18, 10),
                ),
                Comment(
                    author="Maria Gomez",
                    text="I hope there are sessions on ethical AI.",
                    date=_utc(2025, 5, 18, 11, 30),
                ),
            ),
        ),
        Event(
            id=EventId("2"),
            title="Music Festival in the Park",
            description=(
                "A weekend packed with the best artists from the local and "
                "international independent scene. Food trucks and activities included."
            ),
            category="music",
            date=date(2025, 8, 22),
            image_url="PROYECTO/Imagenes/Fiesta.jpeg",
            votes=VoteCount(85),
        ),
        Event(
            id=EventId("3"),
            title='Modern Art Exhibition: "Shapes of Silence"',
            description=(
                "A curated collection of contemporary works by emerging artists. "
                "Explore expression through a range of techniques and media."
            ),
            category="art",
            date=date(2025, 9, 5),
            image_url="PROYECTO/Imagenes/Arte.jpg",
            votes=VoteCount(95),
            comments=(
                Comment(
                    author="Carlos Lopez",
                    text="Impressive exhibition! I loved the sculpture section.",
                    date=_utc(2025, 5, 17, 15),
                ),
            ),
        ),
        Event(
            id=EventId("4"),
            title="Healthy City 10K Run",
            description=(
                "Join the annual race through the city streets, promoting health "
                "and wellbeing. Open to runners of every level."
            ),
            category="sports",
            date=date(2025, 10, 10),
            image_url="PROYECTO/Imagenes/10KM.webp",
            votes=VoteCount(60),
        ),
        Event(
            id=EventId("5"),
            title="Urban Photography Workshop",
            description=(
                "Learn street photography techniques with a professional "
                "photographer. We will explore the most photogenic corners of the city."
            ),
            category="art",
            date=date(2025, 7, 20),
            image_url="PROYECTO/Imagenes/FotografiaUrbana.jpg",
            votes=VoteCount(75),
        ),
    ]
