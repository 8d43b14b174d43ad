"""Dict-backed key-value storage."""

from ghfollowers.storage.base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Volatile store; contents live as long as the instance."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    async def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def close(self) -> None:
        pass
