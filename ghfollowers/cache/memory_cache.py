"""In-process LRU image cache."""

from collections import OrderedDict

from ghfollowers.cache.base import ImageCache
from ghfollowers.models.image import CachedImage


class MemoryImageCache(ImageCache):
    """
    Memory-only image cache bounded by entry count and total bytes.

    Least recently used entries are evicted first once either bound is
    exceeded. Nothing survives the process.

    Example:
        cache = MemoryImageCache(max_entries=100)
        await cache.put(url, image)
        cached = await cache.get(url)
    """

    def __init__(self, max_entries: int = 500, max_bytes: int = 50 * 1024 * 1024):
        """
        Initialize memory cache.

        Args:
            max_entries: Maximum number of images kept
            max_bytes: Maximum total payload size in bytes
        """
        self.max_entries = max_entries
        self.max_bytes = max_bytes
        self._entries: OrderedDict[str, CachedImage] = OrderedDict()
        self._total_bytes = 0
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def total_bytes(self) -> int:
        return self._total_bytes

    async def get(self, url: str) -> CachedImage | None:
        """Retrieve cached image, None on miss."""
        image = self._entries.get(url)
        if image is None:
            self.misses += 1
            return None

        self._entries.move_to_end(url)
        self.hits += 1
        return image

    async def put(self, url: str, image: CachedImage) -> None:
        """Store image, evicting least recently used entries as needed."""
        if image.size > self.max_bytes or self.max_entries <= 0:
            return

        await self.invalidate(url)
        self._entries[url] = image
        self._total_bytes += image.size
        self._evict()

    async def invalidate(self, url: str) -> None:
        """Remove cached image for url."""
        image = self._entries.pop(url, None)
        if image is not None:
            self._total_bytes -= image.size

    async def clear(self) -> None:
        """Clear all cached images."""
        self._entries.clear()
        self._total_bytes = 0

    def _evict(self) -> None:
        while self._entries and (
            len(self._entries) > self.max_entries or self._total_bytes > self.max_bytes
        ):
            _, image = self._entries.popitem(last=False)
            self._total_bytes -= image.size
