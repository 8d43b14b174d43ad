"""Application wiring - builds services once and hands them out."""

from ghfollowers.cache.memory_cache import MemoryImageCache
from ghfollowers.config import AppConfig, StorageBackend
from ghfollowers.core.client import GitHubClient
from ghfollowers.core.favorites import FavoritesStore
from ghfollowers.core.follower_list import FollowerListController
from ghfollowers.logging import configure_logging, get_logger
from ghfollowers.storage.base import KeyValueStore
from ghfollowers.storage.memory_store import MemoryStore
from ghfollowers.storage.sqlite_store import SQLiteStore


class AppContext:
    """
    Owns the process-wide services: API client, image cache, favorites.

    Example:
        async with AppContext() as ctx:
            controller = ctx.follower_list()
            await controller.start("torvalds")
            favorites = await ctx.favorites.retrieve()
    """

    def __init__(self, config: AppConfig | None = None, configure_logs: bool = True):
        """
        Initialize context with optional configuration.

        Args:
            config: AppConfig instance, uses defaults if None
            configure_logs: Apply logging configuration on entry
        """
        self.config = config or AppConfig()
        self.configure_logs = configure_logs
        self._client: GitHubClient | None = None
        self._storage: KeyValueStore | None = None
        self._favorites: FavoritesStore | None = None
        self._log = get_logger("context")

    async def __aenter__(self) -> "AppContext":
        """Async context manager entry - initialize services."""
        if self.configure_logs:
            configure_logging(self.config)

        image_cache = MemoryImageCache(
            self.config.image_cache_max_entries,
            self.config.image_cache_max_bytes,
        )
        self._client = GitHubClient(self.config, image_cache=image_cache)

        if self.config.storage_backend == StorageBackend.SQLITE:
            self._storage = SQLiteStore(self.config.sqlite_path)
        else:
            self._storage = MemoryStore()
        self._favorites = FavoritesStore(self._storage)

        self._log.debug(
            "context_ready",
            api_base_url=self.config.api_base_url,
            storage_backend=self.config.storage_backend.value,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup resources."""
        if self._client:
            await self._client.close()
            self._client = None
        if self._storage:
            await self._storage.close()
            self._storage = None
        self._favorites = None

    @property
    def client(self) -> GitHubClient:
        if self._client is None:
            raise RuntimeError("AppContext used outside 'async with'")
        return self._client

    @property
    def favorites(self) -> FavoritesStore:
        if self._favorites is None:
            raise RuntimeError("AppContext used outside 'async with'")
        return self._favorites

    def follower_list(self) -> FollowerListController:
        """Create a controller for a new follower list screen."""
        return FollowerListController(
            self.client,
            self.favorites,
            prefetch_distance=self.config.prefetch_distance,
        )
