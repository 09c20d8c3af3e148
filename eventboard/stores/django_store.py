"""Django ORM implementation of the MirrorStore."""

import logging

from django.db import DatabaseError, transaction

from eventboard.domain.errors import PersistenceError
from eventboard.models import StoredMirror
from eventboard.stores.interfaces import MirrorStore

logger = logging.getLogger(__name__)


class DjangoMirrorStore(MirrorStore):
    """Database-backed mirror using one StoredMirror row per key."""

    def __init__(self, key: str = "events") -> None:
        self.key = key

    def read(self) -> str | None:
        try:
            row = StoredMirror.objects.filter(key=self.key).first()
        except DatabaseError as exc:
            logger.exception("Failed to read mirror %r", self.key)
            raise PersistenceError("Could not load events") from exc
        return row.payload if row is not None else None

    def write(self, payload: str) -> None:
        try:
            with transaction.atomic():
                StoredMirror.objects.update_or_create(
                    key=self.key, defaults={"payload": payload}
                )
        except DatabaseError as exc:
            logger.exception("Failed to write mirror %r", self.key)
            raise PersistenceError() from exc
