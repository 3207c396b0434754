"""Session helpers for NiceGUI pages.

Bridges NiceGUI's ``app.storage.user`` with the API session: the stored access
token decides whether a browser is signed in, and the ``/me/`` answer fetched on
every page load decides which views it may open.
"""

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from loguru import logger
from nicegui import app, ui
from pydantic import ValidationError

from portal.client.http import ApiClient
from portal.client.session import SessionStore
from portal.core.exceptions import PortalApiError, UnauthorizedError
from portal.schemas.account import UserInfo
from portal.ui.services.accounts import CUSTOMER_LANDING_PATH, get_current_user_service

P = ParamSpec("P")
R = TypeVar("R")

LOGIN_PATH = "/login"


def get_session_store() -> SessionStore:
    """Session of the browser behind the current request."""
    return SessionStore(app.storage.user)


def redirect_to_login() -> None:
    ui.navigate.to(LOGIN_PATH)


def get_api_client(*, redirect_on_unauthorized: bool = True) -> ApiClient:
    """API client bound to the current browser session.

    Args:
        redirect_on_unauthorized: Navigate to the login page after a 401.
            Authentication forms turn this off to report bad credentials inline.
    """
    return ApiClient(
        get_session_store(),
        on_unauthorized=redirect_to_login if redirect_on_unauthorized else None,
    )


async def get_current_ui_user() -> UserInfo | None:
    """Get the signed-in user, or None.

    Asks ``/me/`` on every call so role changes and revoked tokens take effect
    on the next page load. A 401 clears the session and yields None. When the
    API cannot answer for another reason the cached ``/me/`` answer is used.
    """
    session = get_session_store()
    if not session.is_authenticated:
        return None

    try:
        async with get_api_client(redirect_on_unauthorized=False) as client:
            return await get_current_user_service(client)
    except UnauthorizedError:
        logger.info("Session rejected by the API")
        return None
    except PortalApiError as e:
        logger.warning(f"Unable to load the current user: {e.message}")
    except ValidationError as e:
        logger.error(f"Malformed /me/ response: {e}")
    return session.user


def logout_ui_user() -> None:
    """Forget the session and go back to the login page."""
    get_session_store().clear()
    logger.info("User logged out")
    ui.navigate.to(LOGIN_PATH)
    ui.notify("Logged out successfully", color="positive")


def _page_signature(func: Callable[..., object]) -> inspect.Signature:
    """Signature of a page function without its leading ``user`` parameter.

    NiceGUI resolves page parameters from the signature, so the user injected
    by the decorators must not appear in it.
    """
    signature = inspect.signature(func)
    return signature.replace(parameters=list(signature.parameters.values())[1:])


def require_auth(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R | None]]:  # noqa: UP047
    """Decorator that requires a signed-in user for a page function.

    The user is passed to the wrapped function as first argument.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:  # type: ignore[valid-type]
        user = await get_current_ui_user()
        if user is None:
            redirect_to_login()
            return None
        return await func(user, *args, **kwargs)  # type: ignore[call-arg]

    wrapper.__signature__ = _page_signature(func)  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]


def require_staff(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R | None]]:  # noqa: UP047
    """Decorator that restricts a page function to staff users.

    Anonymous visitors go to the login page; signed-in customers are sent
    back to their dashboard.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:  # type: ignore[valid-type]
        user = await get_current_ui_user()
        if user is None:
            redirect_to_login()
            return None
        if not user.is_staff:
            logger.bind(user_id=user.id).warning("Non-staff user opened an admin view")
            ui.navigate.to(CUSTOMER_LANDING_PATH)
            return None
        return await func(user, *args, **kwargs)  # type: ignore[call-arg]

    wrapper.__signature__ = _page_signature(func)  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]
