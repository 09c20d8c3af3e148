"""In-process implementation of the MirrorStore."""

from eventboard.stores.interfaces import MirrorStore


class InMemoryMirrorStore(MirrorStore):
    """Mirror kept in a plain dict, keyed like the database store.

    Several stores may share one ``slots`` dict to simulate separate
    processes reading the same persisted state.
    """

    def __init__(self, key: str = "events", slots: dict[str, str] | None = None) -> None:
        self.key = key
        self.slots = slots if slots is not None else {}

    def read(self) -> str | None:
        return self.slots.get(self.key)

    def write(self, payload: str) -> None:
        self.slots[self.key] = payload
