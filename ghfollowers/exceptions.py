"""Custom exception hierarchy for ghfollowers.

Every error carries a ``title`` and a ``message`` fit for showing to a user.
"""


class GHFollowersError(Exception):
    """Base exception for all ghfollowers errors."""

    title = "Something went wrong"
    message = "Unable to complete your request. Please try again."

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class FetchError(GHFollowersError):
    """Failed to fetch a resource from the API."""


class InvalidUsernameError(FetchError):
    """Username cannot form a valid request target."""

    message = "This username created an invalid request. Please try again."


class InvalidResponseError(FetchError):
    """Server answered with a status other than 200."""

    message = "Invalid response from the server. Please try again."

    def __init__(self, detail: str | None = None, status_code: int | None = None):
        super().__init__(detail)
        self.status_code = status_code


class InvalidDataError(FetchError):
    """Response body could not be decoded into the expected shape."""

    message = "The data received from the server was invalid. Please try again."


class TransportError(FetchError):
    """Network or connectivity failure."""

    message = "Unable to complete your request. Please check your internet connection."


class FavoritesError(GHFollowersError):
    """Favorites operation failed."""


class AlreadyInFavoritesError(FavoritesError):
    """Profile is already in the favorites set."""

    message = "You've already favorited this user. You must REALLY like them!"


class UnableToPersistError(FavoritesError):
    """Favorites could not be read from or written to storage."""

    message = "There was an error favoriting this user. Please try again."


class StorageError(GHFollowersError):
    """Key-value storage operation failed."""
