"""Session values persisted in the browser-bound storage.

The portal persists exactly three things per browser: the access token, the
refresh token and the last ``/me/`` answer. In the running UI the backing
mapping is NiceGUI's ``app.storage.user``; tests use a plain dict.
"""

from collections.abc import MutableMapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from portal.schemas.account import TokenPair, UserInfo

ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"
USER_INFO_KEY = "user_info"
REFERRER_PATH_KEY = "referrer_path"

SESSION_KEYS = (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_INFO_KEY)


class SessionStore:
    """Typed access to the persisted session values."""

    def __init__(self, storage: MutableMapping[str, Any]) -> None:
        self._storage = storage

    @property
    def access_token(self) -> str | None:
        return self._storage.get(ACCESS_TOKEN_KEY) or None

    @property
    def refresh_token(self) -> str | None:
        return self._storage.get(REFRESH_TOKEN_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        return self.access_token is not None

    @property
    def user(self) -> UserInfo | None:
        """The cached ``/me/`` answer, or None when absent or unreadable."""
        raw = self._storage.get(USER_INFO_KEY)
        if not raw:
            return None
        try:
            return UserInfo.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable cached user info: {e}")
            self._storage.pop(USER_INFO_KEY, None)
            return None

    def save_tokens(self, tokens: TokenPair) -> None:
        self._storage[ACCESS_TOKEN_KEY] = tokens.access
        if tokens.refresh:
            self._storage[REFRESH_TOKEN_KEY] = tokens.refresh
        else:
            self._storage.pop(REFRESH_TOKEN_KEY, None)

    def save_user(self, user: UserInfo) -> None:
        self._storage[USER_INFO_KEY] = user.model_dump(mode="json")

    def clear(self) -> None:
        """Forget tokens and user info. The post-login referrer is kept."""
        for key in SESSION_KEYS:
            self._storage.pop(key, None)

    def remember_referrer(self, path: str) -> None:
        self._storage[REFERRER_PATH_KEY] = path

    def pop_referrer(self) -> str | None:
        return self._storage.pop(REFERRER_PATH_KEY, None)
