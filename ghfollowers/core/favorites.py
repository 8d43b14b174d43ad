"""Durable favorites set over a key-value store."""

import asyncio

from pydantic import TypeAdapter, ValidationError

from ghfollowers.exceptions import AlreadyInFavoritesError, StorageError, UnableToPersistError
from ghfollowers.logging import get_logger
from ghfollowers.models.follower import Follower
from ghfollowers.storage.base import KeyValueStore

FAVORITES_KEY = "favorites"

_favorites_adapter = TypeAdapter(list[Follower])


class FavoritesStore:
    """
    Insertion-ordered set of favorite followers, unique by login.

    Every mutation reads the whole set, applies the change and writes the
    whole set back under a single key. Mutations on one instance are
    serialized by a lock; separate instances sharing a backend are not.
    """

    def __init__(self, storage: KeyValueStore, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key
        self._lock = asyncio.Lock()
        self._log = get_logger("favorites")

    async def retrieve(self) -> list[Follower]:
        """
        Return all favorites in insertion order.

        Returns:
            Favorites, empty when nothing was ever stored

        Raises:
            UnableToPersistError: If storage fails or holds undecodable data
        """
        try:
            raw = await self.storage.get(self.key)
        except StorageError as e:
            raise UnableToPersistError(str(e)) from e

        if raw is None:
            return []

        try:
            return _favorites_adapter.validate_json(raw)
        except ValidationError as e:
            self._log.error("favorites_corrupt", key=self.key, errors=e.error_count())
            raise UnableToPersistError("Stored favorites could not be decoded") from e

    async def add(self, follower: Follower) -> None:
        """
        Append a follower to favorites.

        Raises:
            AlreadyInFavoritesError: If the login is already stored
            UnableToPersistError: If the set cannot be read or written
        """
        async with self._lock:
            favorites = await self.retrieve()
            if follower in favorites:
                raise AlreadyInFavoritesError(f"{follower.login} is already a favorite")

            favorites.append(follower)
            await self._save(favorites)

        self._log.info("favorite_added", login=follower.login, total=len(favorites))

    async def remove(self, favorite: Follower | str) -> None:
        """
        Remove a favorite by login. Removing an absent login succeeds.

        Raises:
            UnableToPersistError: If the set cannot be read or written
        """
        login = favorite.login if isinstance(favorite, Follower) else favorite

        async with self._lock:
            favorites = await self.retrieve()
            remaining = [f for f in favorites if f.login != login]
            if len(remaining) == len(favorites):
                return
            await self._save(remaining)

        self._log.info("favorite_removed", login=login, total=len(remaining))

    async def contains(self, login: str) -> bool:
        """Check whether a login is in favorites."""
        return any(f.login == login for f in await self.retrieve())

    async def _save(self, favorites: list[Follower]) -> None:
        try:
            payload = _favorites_adapter.dump_json(favorites, by_alias=True)
            await self.storage.set(self.key, payload)
        except (StorageError, ValueError, TypeError) as e:
            self._log.error("favorites_save_failed", key=self.key, error=str(e))
            raise UnableToPersistError(str(e)) from e
