"""Unit tests for data models - uses JSON fixtures, no internet."""

import json

import pytest
from pydantic import ValidationError

from ghfollowers.models.follower import Follower
from ghfollowers.models.user import User
from ghfollowers.models.image import CachedImage

from conftest import load_fixture


class TestFollowerIdentity:
    """Test login-based equality."""

    def test_same_login_is_equal(self):
        a = Follower(login="octocat", avatar_url="https://a.example.com/1.png")
        b = Follower(login="octocat", avatar_url="https://a.example.com/2.png")
        assert a == b
        assert hash(a) == hash(b)

    def test_different_login_not_equal(self):
        a = Follower(login="octocat", avatar_url="https://a.example.com/1.png")
        b = Follower(login="nanocat", avatar_url="https://a.example.com/1.png")
        assert a != b

    def test_set_deduplicates_by_login(self):
        followers = {
            Follower(login="octocat", avatar_url="x"),
            Follower(login="octocat", avatar_url="y"),
            Follower(login="nanocat", avatar_url="x"),
        }
        assert len(followers) == 2

    def test_login_is_case_sensitive(self):
        assert Follower(login="Octocat", avatar_url="x") != Follower(login="octocat", avatar_url="x")

    def test_empty_login_rejected(self):
        with pytest.raises(ValidationError):
            Follower(login="", avatar_url="x")

    def test_frozen(self):
        follower = Follower(login="octocat", avatar_url="x")
        with pytest.raises(ValidationError):
            follower.login = "other"


class TestFollowerSerialization:
    """Test wire and persisted layouts."""

    def test_decodes_wire_payload(self):
        payload = load_fixture("followers_octocat_page1.json")
        followers = [Follower.model_validate(item) for item in payload]

        assert [f.login for f in followers] == ["nanocat", "Annabelle", "bobby-tables"]
        assert followers[0].avatar_url == "https://avatars.githubusercontent.com/u/1001?v=4"

    def test_dumps_persisted_layout(self):
        follower = Follower(login="octocat", avatar_url="https://a.example.com/1.png")
        data = json.loads(follower.model_dump_json(by_alias=True))
        assert data == {"login": "octocat", "avatarUrl": "https://a.example.com/1.png"}

    def test_decodes_persisted_layout(self):
        follower = Follower.model_validate({"login": "octocat", "avatarUrl": "https://a.example.com/1.png"})
        assert follower.avatar_url == "https://a.example.com/1.png"


class TestUser:
    """Test user detail model."""

    def test_decodes_fixture(self, octocat):
        assert octocat.login == "octocat"
        assert octocat.name == "The Octocat"
        assert octocat.bio is None
        assert octocat.public_repos == 8
        assert octocat.followers == 17542
        assert octocat.html_url == "https://github.com/octocat"
        assert octocat.created_at.year == 2011

    def test_member_since(self, octocat):
        assert octocat.member_since == "Jan 2011"

    def test_to_follower(self, octocat):
        follower = octocat.to_follower()
        assert follower.login == "octocat"
        assert follower.avatar_url == octocat.avatar_url

    def test_has_followers(self, octocat):
        assert octocat.has_followers is True
        lonely = octocat.model_copy(update={"followers": 0})
        assert lonely.has_followers is False

    def test_negative_counts_rejected(self):
        payload = load_fixture("user_octocat.json")
        payload["public_repos"] = -1
        with pytest.raises(ValidationError):
            User.model_validate(payload)

    def test_missing_required_field_rejected(self):
        payload = load_fixture("user_octocat.json")
        del payload["created_at"]
        with pytest.raises(ValidationError):
            User.model_validate(payload)


class TestCachedImage:
    def test_size(self):
        image = CachedImage(url="https://a.example.com/1.png", content_type="image/png", data=b"12345")
        assert image.size == 5
