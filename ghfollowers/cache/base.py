"""Abstract image cache interface."""

from abc import ABC, abstractmethod

from ghfollowers.models.image import CachedImage


class ImageCache(ABC):
    """
    Abstract base class for image cache implementations.

    Entries may be dropped at any time; a miss is the normal "not cached"
    case, never an error. Keys are literal URL strings.
    """

    @abstractmethod
    async def get(self, url: str) -> CachedImage | None:
        """
        Retrieve a cached image.

        Args:
            url: Image URL exactly as requested

        Returns:
            CachedImage or None on miss
        """
        ...

    @abstractmethod
    async def put(self, url: str, image: CachedImage) -> None:
        """
        Store an image.

        Args:
            url: Image URL exactly as requested
            image: Downloaded image
        """
        ...

    @abstractmethod
    async def invalidate(self, url: str) -> None:
        """Remove a single entry."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Clear all cached entries."""
        ...

    async def close(self) -> None:
        """Release resources held by the cache."""

    async def __aenter__(self) -> "ImageCache":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
