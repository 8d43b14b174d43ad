"""Shared test helpers."""

import json
from pathlib import Path

import pytest

from ghfollowers.models.follower import Follower
from ghfollowers.models.user import User

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    """Load a JSON fixture as plain Python data."""
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def make_followers(count: int, prefix: str = "user") -> list[Follower]:
    """Build count distinct followers named prefix0, prefix1, ..."""
    return [
        Follower(login=f"{prefix}{i}", avatar_url=f"https://avatars.example.com/{prefix}{i}.png")
        for i in range(count)
    ]


@pytest.fixture
def octocat() -> User:
    return User.model_validate(load_fixture("user_octocat.json"))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep stray GHFOLLOWERS_* variables and .env files out of tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_TOKEN", "STORAGE_BACKEND", "SQLITE_PATH", "LOG_LEVEL", "API_BASE_URL"):
        monkeypatch.delenv(f"GHFOLLOWERS_{name}", raising=False)
