"""ghfollowers - GitHub followers browser."""

from ghfollowers.models.follower import Follower
from ghfollowers.models.user import User
from ghfollowers.models.image import CachedImage
from ghfollowers.config import AppConfig
from ghfollowers.core.client import GitHubClient, PAGE_SIZE
from ghfollowers.core.context import AppContext
from ghfollowers.core.favorites import FavoritesStore
from ghfollowers.core.follower_list import FollowerListController

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "AppContext",
    "AppConfig",
    "GitHubClient",
    "FavoritesStore",
    "FollowerListController",
    "PAGE_SIZE",
    # Models
    "Follower",
    "User",
    "CachedImage",
    "__version__",
]
