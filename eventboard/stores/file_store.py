"""JSON file implementation of the MirrorStore.

Writes go to a sibling temp file first and are moved into place with
os.replace, so a reader never sees a half-written payload.
"""

import logging
import os
from pathlib import Path

from eventboard.domain.errors import PersistenceError
from eventboard.stores.interfaces import MirrorStore

logger = logging.getLogger(__name__)


class FileMirrorStore(MirrorStore):
    """Mirror stored as a single JSON file on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def read(self) -> str | None:
        # UnicodeDecodeError is a ValueError and propagates as corrupt data.
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.exception("Failed to read mirror file %s", self.path)
            raise PersistenceError("Could not load events") from exc

    def write(self, payload: str) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.exception("Failed to write mirror file %s", self.path)
            raise PersistenceError() from exc
