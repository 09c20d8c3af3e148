"""Service construction from Django settings.

``get_event_service()`` returns one shared EventService per process, built
from ``settings.EVENTBOARD``.
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from eventboard.services.event_service import DEFAULT_PLACEHOLDER_IMAGE, EventService
from eventboard.stores import (
    DjangoMirrorStore,
    FileMirrorStore,
    InMemoryMirrorStore,
    MirrorStore,
)

_SERVICE: EventService | None = None


def build_mirror_store(config: dict) -> MirrorStore:
    """Create the mirror store named by ``config["MIRROR_BACKEND"]``."""
    backend = config.get("MIRROR_BACKEND", "django")
    key = config.get("MIRROR_KEY", "events")
    if backend == "django":
        return DjangoMirrorStore(key=key)
    if backend == "file":
        path = config.get("MIRROR_PATH")
        if not path:
            raise ImproperlyConfigured("EVENTBOARD['MIRROR_PATH'] is required for the file backend")
        return FileMirrorStore(path)
    if backend == "memory":
        return InMemoryMirrorStore(key=key)
    raise ImproperlyConfigured(f"Unknown EVENTBOARD['MIRROR_BACKEND']: {backend!r}")


def get_event_service() -> EventService:
    """Return the shared EventService, creating it on first use."""
    global _SERVICE
    if _SERVICE is None:
        config = getattr(settings, "EVENTBOARD", {})
        _SERVICE = EventService(
            build_mirror_store(config),
            placeholder_image=config.get("PLACEHOLDER_IMAGE", DEFAULT_PLACEHOLDER_IMAGE),
        )
    return _SERVICE


def reset_event_service() -> None:
    """Forget the shared EventService so the next call rebuilds it."""
    global _SERVICE
    _SERVICE = None


__all__ = [
    "EventService",
    "build_mirror_store",
    "get_event_service",
    "reset_event_service",
]
