"""Store interfaces (repository pattern).

Stores must be swappable. A mirror store holds the serialized event
collection under a single slot and knows nothing about its contents.
"""

from abc import ABC, abstractmethod


class MirrorStore(ABC):
    """Interface for the persisted mirror of the event collection."""

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored payload, or None if nothing has been written.

        Raises:
            PersistenceError: If the backing storage cannot be read.
            ValueError: If the stored bytes cannot be decoded to text.
        """
        ...

    @abstractmethod
    def write(self, payload: str) -> None:
        """Replace the stored payload with *payload*.

        Raises:
            PersistenceError: If the backing storage cannot be written.
        """
        ...
