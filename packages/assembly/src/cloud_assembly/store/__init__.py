from .base import SessionStore, normalize_key
from .filesystem import FileSystemStore
from .memory import InMemoryStore

__all__ = [
    "FileSystemStore",
    "InMemoryStore",
    "SessionStore",
    "normalize_key",
]
