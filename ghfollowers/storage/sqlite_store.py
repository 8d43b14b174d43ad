"""SQLite-based key-value storage."""

import sqlite3
import time
from pathlib import Path

import aiosqlite

from ghfollowers.exceptions import StorageError
from ghfollowers.storage.base import KeyValueStore


class SQLiteStore(KeyValueStore):
    """SQLite-backed local key-value store using aiosqlite."""

    def __init__(self, db_path: str = ".ghfollowers.db"):
        """
        Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self._db: aiosqlite.Connection | None = None

    async def _ensure_db(self) -> aiosqlite.Connection:
        """Ensure database connection and schema exist."""
        if self._db is None:
            try:
                self._db = await aiosqlite.connect(self.db_path)
                await self._db.execute("""
                    CREATE TABLE IF NOT EXISTS kv (
                        key TEXT PRIMARY KEY,
                        value BLOB NOT NULL,
                        updated_at REAL NOT NULL
                    )
                """)
                await self._db.commit()
            except (sqlite3.Error, OSError) as e:
                await self.close()
                raise StorageError(f"Cannot open {self.db_path}: {e}") from e
        return self._db

    async def get(self, key: str) -> bytes | None:
        """Read value for key, None if absent."""
        db = await self._ensure_db()
        try:
            async with db.execute("SELECT value FROM kv WHERE key = ?", (key,)) as cursor:
                row = await cursor.fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Read of {key!r} failed: {e}") from e

        if row is None:
            return None
        value = row[0]
        return value.encode("utf-8") if isinstance(value, str) else bytes(value)

    async def set(self, key: str, value: bytes) -> None:
        """Replace value for key."""
        db = await self._ensure_db()
        try:
            await db.execute(
                """
                INSERT OR REPLACE INTO kv (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, time.time()),
            )
            await db.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Write of {key!r} failed: {e}") from e

    async def delete(self, key: str) -> None:
        """Remove key."""
        db = await self._ensure_db()
        try:
            await db.execute("DELETE FROM kv WHERE key = ?", (key,))
            await db.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Delete of {key!r} failed: {e}") from e

    async def close(self) -> None:
        """Close database connection."""
        if self._db is not None:
            await self._db.close()
            self._db = None
