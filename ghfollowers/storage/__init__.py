"""Key-value storage backends."""

from ghfollowers.storage.base import KeyValueStore
from ghfollowers.storage.sqlite_store import SQLiteStore
from ghfollowers.storage.memory_store import MemoryStore

__all__ = ["KeyValueStore", "SQLiteStore", "MemoryStore"]
