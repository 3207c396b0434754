"""Login page and Google sign-in callback.

Credentials are exchanged at ``/token/``; the session then stores the token
pair and the ``/me/`` answer, and the browser lands on the page the auth guard
remembered, or on the dashboard matching the user's role.
"""

from urllib.parse import parse_qs, urlencode

from fastapi import Request
from loguru import logger
from nicegui import ui

from portal.core.config import settings
from portal.core.exceptions import PortalApiError, UnauthorizedError
from portal.schemas.account import UserInfo
from portal.ui.auth.context import LOGIN_PATH, get_api_client, get_session_store
from portal.ui.services.accounts import (
    google_login_service,
    landing_path,
    login_service,
)

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_CALLBACK_PATH = "/auth/google/callback"


def google_authorize_url(client_id: str, redirect_uri: str) -> str:
    """Start URL of the Google OAuth implicit flow."""
    query = urlencode(
        {
            "client_id": client_id,
            "redirect_uri": redirect_uri,
            "response_type": "token",
            "scope": "openid email profile",
            "prompt": "select_account",
        }
    )
    return f"{GOOGLE_AUTHORIZE_URL}?{query}"


def access_token_from_fragment(fragment: str) -> str | None:
    """Read ``access_token`` from a ``#access_token=...&...`` URL fragment."""
    values = parse_qs(fragment.lstrip("#"))
    tokens = values.get("access_token")
    return tokens[0] if tokens else None


def post_login_path(user: UserInfo) -> str:
    """Remembered destination, or the landing page for the user's role."""
    return get_session_store().pop_referrer() or landing_path(user)


@ui.page(LOGIN_PATH)
async def login_page(request: Request) -> None:
    """Username/password form, plus Google sign-in when configured."""
    session = get_session_store()
    user = session.user
    if session.is_authenticated and user is not None:
        ui.navigate.to(landing_path(user))
        return

    ui.page_title(f"Sign in | {settings.PROJECT_NAME}")

    with ui.card().classes("w-96 mx-auto mt-20"):
        ui.label(settings.PROJECT_NAME).classes("text-2xl font-bold")
        ui.label("Sign in to your account").classes("text-gray-500 mb-4")

        username_input = ui.input(
            label="Username",
            validation={"Username is required": lambda x: len(x) > 0},
        ).classes("w-full")

        password_input = (
            ui.input(
                label="Password",
                validation={"Password is required": lambda x: len(x) > 0},
            )
            .classes("w-full")
            .props("type=password password-toggle-button")
        )

        error_label = ui.label("").classes("text-red-500 text-sm")
        error_label.set_visibility(False)

        login_button = ui.button("Sign In", color="primary").classes("w-full mt-2")

        def show_error(message: str) -> None:
            error_label.text = message
            error_label.set_visibility(True)
            ui.notify(message, color="negative")

        async def handle_login() -> None:
            username = (username_input.value or "").strip()
            password = password_input.value or ""
            if not username or not password:
                show_error("Username and password are required")
                return

            login_button.disable()
            try:
                async with get_api_client(redirect_on_unauthorized=False) as client:
                    user = await login_service(username, password, client)
            except UnauthorizedError:
                logger.warning(f"Failed login attempt for username: {username}")
                show_error("Invalid username or password")
                return
            except PortalApiError as e:
                show_error(e.message)
                return
            finally:
                login_button.enable()

            ui.navigate.to(post_login_path(user))
            ui.notify("Login successful", color="positive")

        login_button.on_click(handle_login)
        username_input.on("keydown.enter", handle_login)
        password_input.on("keydown.enter", handle_login)

        if settings.GOOGLE_CLIENT_ID:
            redirect_uri = str(request.base_url).rstrip("/") + GOOGLE_CALLBACK_PATH
            authorize_url = google_authorize_url(
                settings.GOOGLE_CLIENT_ID, redirect_uri
            )
            ui.separator().classes("my-2")
            ui.button(
                "Continue with Google",
                icon="login",
                on_click=lambda: ui.navigate.to(authorize_url),
            ).props("outline").classes("w-full")

        with ui.row().classes("w-full justify-between mt-2 text-sm"):
            ui.link("Forgot password?", "/forgot-password")
            ui.link("Create an account", "/register")


@ui.page(GOOGLE_CALLBACK_PATH)
async def google_callback_page() -> None:
    """Finish the Google implicit flow.

    The access token travels in the URL fragment, which never reaches the
    server, so it is read from the browser once the page is connected.
    """
    ui.page_title(f"Signing in | {settings.PROJECT_NAME}")
    with ui.column().classes("w-full items-center mt-20"):
        ui.spinner(size="lg")
        status_label = ui.label("Signing in with Google...")

    await ui.context.client.connected()
    fragment = await ui.run_javascript("window.location.hash")
    access_token = access_token_from_fragment(fragment or "")
    if not access_token:
        status_label.text = "Google sign-in was cancelled"
        ui.navigate.to(LOGIN_PATH)
        return

    try:
        async with get_api_client(redirect_on_unauthorized=False) as client:
            user = await google_login_service(access_token, client)
    except PortalApiError as e:
        logger.warning(f"Google sign-in failed: {e.message}")
        ui.notify(e.message_or("Google sign-in failed"), color="negative")
        ui.navigate.to(LOGIN_PATH)
        return

    ui.navigate.to(post_login_path(user))
