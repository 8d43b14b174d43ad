"""Image cache implementations."""

from ghfollowers.cache.base import ImageCache
from ghfollowers.cache.memory_cache import MemoryImageCache

__all__ = ["ImageCache", "MemoryImageCache"]
