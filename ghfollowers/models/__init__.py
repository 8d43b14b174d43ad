"""Data models for ghfollowers."""

from ghfollowers.models.follower import Follower
from ghfollowers.models.user import User
from ghfollowers.models.image import CachedImage

__all__ = [
    "Follower",
    "User",
    "CachedImage",
]
