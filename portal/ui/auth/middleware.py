"""Authentication middleware for the NiceGUI interface.

Intercepts requests for signed-in pages and redirects browsers without an
access token to the login page, remembering where they were going.
"""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import RedirectResponse
from loguru import logger
from nicegui import app

from portal.client.session import SessionStore
from portal.ui.auth.context import LOGIN_PATH

# Pages reachable without a session
UNRESTRICTED_PATHS = {
    "/",
    LOGIN_PATH,
    "/register",
    "/forgot-password",
    "/auth/google/callback",
}

# NiceGUI internal and static asset routes
UNRESTRICTED_PREFIXES = ("/_nicegui/", "/_static/")

# Page trees that need a session
PROTECTED_PREFIXES = ("/dashboard", "/admin", "/profile")


def _should_bypass_auth(path: str) -> bool:
    """Check if a path should bypass authentication checks.

    Args:
        path: The request path to check

    Returns:
        True if the path should bypass authentication, False otherwise
    """
    if path in UNRESTRICTED_PATHS:
        return True

    if any(path.startswith(prefix) for prefix in UNRESTRICTED_PREFIXES):
        return True

    return not any(
        path == prefix or path.startswith(f"{prefix}/") for prefix in PROTECTED_PREFIXES
    )


async def auth_guard_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """HTTP middleware that enforces a session for protected pages.

    Args:
        request: The incoming HTTP request
        call_next: The next middleware/handler in the chain

    Returns:
        Response: Either a redirect to login or the response from call_next
    """
    path = request.url.path

    if _should_bypass_auth(path):
        return await call_next(request)

    try:
        session = SessionStore(app.storage.user)
        if not session.is_authenticated:
            session.remember_referrer(path)
            logger.debug(f"Unauthenticated access to {path}, redirecting to login")
            return RedirectResponse(url=LOGIN_PATH, status_code=302)
    except (KeyError, ValueError, RuntimeError) as e:
        logger.warning(f"Error checking authentication status: {e}")
        return RedirectResponse(url=LOGIN_PATH, status_code=302)

    return await call_next(request)


def register_auth_middleware(app_instance: FastAPI) -> None:
    """Register the authentication middleware on the NiceGUI application.

    Must run before ``ui.run_with`` so that NiceGUI's storage middlewares,
    added by ``run_with``, wrap it and ``app.storage.user`` is available.

    Args:
        app_instance: The application serving the NiceGUI pages
    """

    @app_instance.middleware("http")
    async def _auth_middleware_wrapper(  # pyright: ignore[reportUnusedFunction]
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        return await auth_guard_middleware(request, call_next)
