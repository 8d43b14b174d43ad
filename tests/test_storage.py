"""Unit tests for key-value storage backends."""

import pytest

from ghfollowers.exceptions import StorageError
from ghfollowers.storage.memory_store import MemoryStore
from ghfollowers.storage.sqlite_store import SQLiteStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test_store.db")


class TestSQLiteStore:
    """Test aiosqlite-backed store."""

    @pytest.mark.asyncio
    async def test_missing_key_returns_none(self, db_path):
        async with SQLiteStore(db_path) as store:
            assert await store.get("favorites") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, db_path):
        async with SQLiteStore(db_path) as store:
            await store.set("favorites", b"[]")
            assert await store.get("favorites") == b"[]"

    @pytest.mark.asyncio
    async def test_set_overwrites(self, db_path):
        async with SQLiteStore(db_path) as store:
            await store.set("k", b"one")
            await store.set("k", b"two")
            assert await store.get("k") == b"two"

    @pytest.mark.asyncio
    async def test_delete(self, db_path):
        async with SQLiteStore(db_path) as store:
            await store.set("k", b"v")
            await store.delete("k")
            assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_survives_reopen(self, db_path):
        async with SQLiteStore(db_path) as store:
            await store.set("k", b"persisted")

        async with SQLiteStore(db_path) as reopened:
            assert await reopened.get("k") == b"persisted"

    @pytest.mark.asyncio
    async def test_unopenable_path_raises_storage_error(self, tmp_path):
        store = SQLiteStore(str(tmp_path / "missing" / "dir" / "store.db"))
        with pytest.raises(StorageError):
            await store.get("k")
        await store.close()


class TestMemoryStore:
    """Test dict-backed store."""

    @pytest.mark.asyncio
    async def test_roundtrip(self):
        store = MemoryStore()
        assert await store.get("k") is None
        await store.set("k", b"v")
        assert await store.get("k") == b"v"
        await store.delete("k")
        assert await store.get("k") is None

    @pytest.mark.asyncio
    async def test_initial_contents(self):
        store = MemoryStore({"k": b"v"})
        assert await store.get("k") == b"v"
