"""Paginated, filterable follower list for one target user."""

from ghfollowers.core.client import PAGE_SIZE, GitHubClient
from ghfollowers.core.favorites import FavoritesStore
from ghfollowers.logging import get_logger
from ghfollowers.models.follower import Follower


class FollowerListController:
    """
    Accumulates a user's followers page by page.

    A session is the browsing of one username's followers; ``start`` opens a
    new one. Each fetch is tagged with the session it was issued for and its
    outcome is dropped if the session changed meanwhile. At most one fetch
    per session is in flight.

    Example:
        controller = FollowerListController(client, favorites)
        await controller.start("torvalds")
        while controller.has_more:
            await controller.load_next_page()
        controller.set_filter("an")
        print([f.login for f in controller.active_view])
    """

    def __init__(
        self,
        client: GitHubClient,
        favorites: FavoritesStore,
        prefetch_distance: int = 10,
    ):
        """
        Initialize controller.

        Args:
            client: API client used for page and profile fetches
            favorites: Store receiving the target user on favoriting
            prefetch_distance: How close to the end a visible row must be
                before should_load_more asks for the next page
        """
        self.client = client
        self.favorites = favorites
        self.prefetch_distance = prefetch_distance
        self._log = get_logger("follower_list")

        self._session = 0
        self._loading_session: int | None = None
        self._username: str | None = None
        self._page = 0
        self._has_more = True
        self._followers: list[Follower] = []
        self._filtered: list[Follower] = []
        self._filter_term = ""

    @property
    def username(self) -> str | None:
        return self._username

    @property
    def page(self) -> int:
        """Last page fetched successfully, 0 before the first one."""
        return self._page

    @property
    def has_more(self) -> bool:
        return self._has_more

    @property
    def is_loading(self) -> bool:
        return self._loading_session == self._session

    @property
    def followers(self) -> list[Follower]:
        return list(self._followers)

    @property
    def filtered_followers(self) -> list[Follower]:
        return list(self._filtered)

    @property
    def filter_term(self) -> str:
        return self._filter_term

    @property
    def is_filtering(self) -> bool:
        return bool(self._filter_term)

    @property
    def active_view(self) -> list[Follower]:
        """Filtered followers while a filter is set, all followers otherwise."""
        return self.filtered_followers if self.is_filtering else self.followers

    @property
    def is_empty(self) -> bool:
        """No followers were found for the target user."""
        return not self._followers and not self.is_loading

    @property
    def no_filter_results(self) -> bool:
        return self.is_filtering and not self._filtered

    async def start(self, username: str) -> bool:
        """
        Open a new session for username and load its first page.

        Anything accumulated for the previous session is discarded, and a
        fetch still in flight for it will be ignored when it completes.

        Returns:
            True if the first page was applied

        Raises:
            FetchError: If the first page could not be fetched
        """
        self._session += 1
        self._username = username
        self._page = 0
        self._has_more = True
        self._followers = []
        self._filtered = []
        self._filter_term = ""
        self._log.info("session_started", username=username, session=self._session)
        return await self.load_next_page()

    async def load_next_page(self) -> bool:
        """
        Fetch and append the next page of the current session.

        Ignored while a fetch is already in flight or after the last page.

        Returns:
            True if a page was fetched and applied

        Raises:
            FetchError: If the fetch failed; state is left untouched so the
                same page can be retried
        """
        if self._username is None or self.is_loading or not self._has_more:
            return False

        session = self._session
        username = self._username
        page = self._page + 1
        self._loading_session = session

        try:
            followers = await self.client.fetch_followers(username, page)
        except Exception:
            if session != self._session:
                self._log.info("stale_error_dropped", username=username, page=page)
                return False
            raise
        finally:
            if self._loading_session == session:
                self._loading_session = None

        if session != self._session:
            self._log.info("stale_response_dropped", username=username, page=page)
            return False

        self._apply_page(page, followers)
        return True

    def set_filter(self, term: str) -> list[Follower]:
        """
        Filter already fetched followers by case-insensitive login substring.

        An empty term clears the filter. Never fetches.

        Returns:
            The resulting active view
        """
        self._filter_term = term
        self._refilter()
        return self.active_view

    def should_load_more(self, visible_index: int) -> bool:
        """Whether showing row visible_index should trigger the next page."""
        if self.is_filtering or self.is_loading or not self._has_more:
            return False
        return visible_index >= len(self._followers) - self.prefetch_distance

    async def add_target_to_favorites(self) -> Follower:
        """
        Add the session's target user to favorites.

        The profile is fetched first for its canonical avatar URL. The
        fetch and the write are not atomic and nothing is retried.

        Returns:
            The stored favorite

        Raises:
            FetchError: If the profile could not be fetched
            AlreadyInFavoritesError: If the user is already a favorite
            UnableToPersistError: If the favorites could not be saved
        """
        if self._username is None:
            raise RuntimeError("No session started")

        user = await self.client.fetch_profile(self._username)
        favorite = user.to_follower()
        await self.favorites.add(favorite)
        return favorite

    def _apply_page(self, page: int, followers: list[Follower]) -> None:
        self._page = page
        if len(followers) < PAGE_SIZE:
            self._has_more = False
        self._followers.extend(followers)
        self._refilter()
        self._log.info(
            "followers_page_loaded",
            username=self._username,
            page=page,
            count=len(followers),
            total=len(self._followers),
            has_more=self._has_more,
        )

    def _refilter(self) -> None:
        if not self._filter_term:
            self._filtered = []
            return
        needle = self._filter_term.lower()
        self._filtered = [f for f in self._followers if needle in f.login.lower()]
