"""Abstract key-value storage interface."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for durable key-value storage."""

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored bytes or None if the key was never written

        Raises:
            StorageError: If the backend cannot be read
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        """
        Replace the value stored under a key.

        Args:
            key: Storage key
            value: Encoded payload

        Raises:
            StorageError: If the backend cannot be written
        """
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key if present."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Cleanup connections and resources."""
        ...

    async def __aenter__(self) -> "KeyValueStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
