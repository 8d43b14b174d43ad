"""User detail model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from ghfollowers.models.follower import Follower


class User(BaseModel):
    """Snapshot of a GitHub user's public profile at fetch time."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(min_length=1)
    avatar_url: str
    name: str | None = None
    location: str | None = None
    bio: str | None = None
    public_repos: NonNegativeInt
    public_gists: NonNegativeInt
    html_url: str
    following: NonNegativeInt
    followers: NonNegativeInt
    created_at: datetime

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.login == other.login

    def __hash__(self) -> int:
        return hash(self.login)

    @property
    def member_since(self) -> str:
        """Account creation date as e.g. ``Mar 2025``."""
        return self.created_at.strftime("%b %Y")

    @property
    def has_followers(self) -> bool:
        return self.followers > 0

    def to_follower(self) -> Follower:
        """Reduce to the identity record stored in favorites."""
        return Follower(login=self.login, avatar_url=self.avatar_url)
