"""Tests for the persisted session store."""

from typing import Any

from portal.client.session import (
    ACCESS_TOKEN_KEY,
    REFERRER_PATH_KEY,
    USER_INFO_KEY,
    SessionStore,
)
from portal.schemas.account import TokenPair, UserInfo


class TestSessionStore:
    """Tests for SessionStore."""

    def test_empty_session(self, session: SessionStore) -> None:
        """Test a fresh browser is anonymous."""
        assert session.is_authenticated is False
        assert session.user is None

    def test_save_tokens_and_user(
        self, session: SessionStore, storage: dict[str, Any]
    ) -> None:
        """Test tokens and user info are persisted as plain values."""
        session.save_tokens(TokenPair(access="a", refresh="r"))
        session.save_user(UserInfo(id=1, username="jane", is_staff=True))

        assert storage[ACCESS_TOKEN_KEY] == "a"
        assert storage[USER_INFO_KEY]["username"] == "jane"
        assert session.is_authenticated is True
        assert session.refresh_token == "r"
        assert session.user == UserInfo(id=1, username="jane", is_staff=True)

    def test_clear_keeps_referrer(
        self, session: SessionStore, storage: dict[str, Any]
    ) -> None:
        """Test clearing forgets credentials but not the post-login target."""
        session.save_tokens(TokenPair(access="a", refresh="r"))
        session.remember_referrer("/dashboard/billing")

        session.clear()

        assert storage == {REFERRER_PATH_KEY: "/dashboard/billing"}
        assert session.pop_referrer() == "/dashboard/billing"
        assert session.pop_referrer() is None

    def test_unreadable_user_is_discarded(
        self, session: SessionStore, storage: dict[str, Any]
    ) -> None:
        """Test a corrupt cached user is dropped instead of raising."""
        storage[USER_INFO_KEY] = {"username": None}
        assert session.user is None
        assert USER_INFO_KEY not in storage
