"""Authentication module for the NiceGUI interface.

Login, registration and password-reset pages, the auth guard middleware, and
the session helpers pages use to reach the API on behalf of the signed-in user.
Pages are registered via the @ui.page decorator when their module is imported.
"""

from portal.ui.auth.context import (
    get_api_client,
    get_current_ui_user,
    get_session_store,
    logout_ui_user,
    require_auth,
    require_staff,
)
from portal.ui.auth.middleware import register_auth_middleware

__all__ = [
    "get_api_client",
    "get_current_ui_user",
    "get_session_store",
    "logout_ui_user",
    "register_auth_middleware",
    "require_auth",
    "require_staff",
]
