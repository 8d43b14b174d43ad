"""Async GitHub users API client."""

import re

import httpx
from pydantic import TypeAdapter, ValidationError

from ghfollowers.cache.base import ImageCache
from ghfollowers.cache.memory_cache import MemoryImageCache
from ghfollowers.config import AppConfig
from ghfollowers.exceptions import (
    InvalidDataError,
    InvalidResponseError,
    InvalidUsernameError,
    TransportError,
)
from ghfollowers.logging import get_logger
from ghfollowers.models.follower import Follower
from ghfollowers.models.image import CachedImage
from ghfollowers.models.user import User

# Maximum page size the followers endpoint accepts
PAGE_SIZE = 100

ACCEPT_HEADER = "application/vnd.github+json"
FOLLOWERS_ENDPOINT_TEMPLATE = "/users/{username}/followers"
USER_ENDPOINT_TEMPLATE = "/users/{username}"

# Whitespace and characters that would change the request path
INVALID_USERNAME_PATTERN = re.compile(r"[\s/?#%\\]")

_followers_adapter = TypeAdapter(list[Follower])


class GitHubClient:
    """
    Fetches followers, profiles and avatars from the GitHub users API.

    Example:
        async with GitHubClient() as client:
            followers = await client.fetch_followers("torvalds", page=1)
            user = await client.fetch_profile("torvalds")
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        image_cache: ImageCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize client.

        Args:
            config: AppConfig instance, uses defaults if None
            image_cache: Cache for downloaded images, in-memory if None
            http_client: Preconfigured httpx client (tests inject a mock transport)
        """
        self.config = config or AppConfig()
        self.image_cache = image_cache or MemoryImageCache(
            self.config.image_cache_max_entries,
            self.config.image_cache_max_bytes,
        )
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.config.request_timeout_seconds,
            follow_redirects=True,
        )
        self._log = get_logger("client")

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    def headers(self) -> dict[str, str]:
        """Build request headers, adding auth when a token is configured."""
        headers = {"Accept": ACCEPT_HEADER, "User-Agent": self.config.user_agent}
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def fetch_followers(self, username: str, page: int) -> list[Follower]:
        """
        Fetch one page of a user's followers.

        Args:
            username: GitHub login whose followers to list
            page: 1-based page number

        Returns:
            Up to PAGE_SIZE followers in server order

        Raises:
            InvalidUsernameError: If username cannot form a request
            InvalidResponseError: If the status is not 200
            InvalidDataError: If the body is not a follower array
            TransportError: If the request never completed
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        url = self._endpoint(FOLLOWERS_ENDPOINT_TEMPLATE, username)
        payload = await self._get_json(url, params={"per_page": PAGE_SIZE, "page": page})

        try:
            followers = _followers_adapter.validate_python(payload)
        except ValidationError as e:
            raise InvalidDataError(f"Unexpected followers payload: {e.error_count()} errors") from e

        self._log.debug("followers_fetched", username=username, page=page, count=len(followers))
        return followers

    async def fetch_profile(self, username: str) -> User:
        """
        Fetch a user's full profile.

        Raises:
            Same as fetch_followers
        """
        url = self._endpoint(USER_ENDPOINT_TEMPLATE, username)
        payload = await self._get_json(url)

        try:
            user = User.model_validate(payload)
        except ValidationError as e:
            raise InvalidDataError(f"Unexpected user payload: {e.error_count()} errors") from e

        self._log.debug("profile_fetched", username=username)
        return user

    async def fetch_image(self, url: str) -> CachedImage | None:
        """
        Download an image, consulting the cache first.

        Never raises: any failure yields None.
        """
        cached = await self.image_cache.get(url)
        if cached is not None:
            return cached

        try:
            response = await self._http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._log.debug("image_fetch_failed", url=url, error=str(e))
            return None

        content_type = response.headers.get("content-type", "").split(";")[0].strip()
        if response.status_code != 200 or not response.content or not content_type.startswith("image/"):
            self._log.debug(
                "image_rejected",
                url=url,
                status=response.status_code,
                content_type=content_type,
            )
            return None

        image = CachedImage(url=url, content_type=content_type, data=response.content)
        await self.image_cache.put(url, image)
        return image

    def _endpoint(self, template: str, username: str) -> str:
        if not username or INVALID_USERNAME_PATTERN.search(username):
            raise InvalidUsernameError(f"Cannot build a request for {username!r}")
        return self.config.api_base_url.rstrip("/") + template.format(username=username)

    async def _get_json(self, url: str, params: dict | None = None):
        """GET url and decode the JSON body, mapping failures by stage."""
        try:
            response = await self._http.get(url, params=params, headers=self.headers())
        except httpx.InvalidURL as e:
            raise InvalidUsernameError(str(e)) from e
        except httpx.DecodingError as e:
            raise InvalidDataError(f"Response body could not be decoded: {e}") from e
        except httpx.RequestError as e:
            # Transport failures and redirect loops
            self._log.warning("transport_error", url=url, error=str(e))
            raise TransportError(str(e)) from e

        if response.status_code != 200:
            self._log.info("unexpected_status", url=url, status=response.status_code)
            raise InvalidResponseError(
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidDataError(f"Response body is not JSON: {e}") from e
