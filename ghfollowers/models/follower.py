"""Follower data model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Follower(BaseModel):
    """
    Minimal identity record for a GitHub account.

    Two followers are the same entity when their logins match, whatever
    their avatar URLs say.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    login: str = Field(min_length=1)
    avatar_url: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Follower):
            return NotImplemented
        return self.login == other.login

    def __hash__(self) -> int:
        return hash(self.login)
