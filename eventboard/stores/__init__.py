from eventboard.stores.django_store import DjangoMirrorStore
from eventboard.stores.file_store import FileMirrorStore
from eventboard.stores.interfaces import MirrorStore
from eventboard.stores.memory_store import InMemoryMirrorStore

__all__ = [
    "MirrorStore",
    "DjangoMirrorStore",
    "FileMirrorStore",
    "InMemoryMirrorStore",
]
