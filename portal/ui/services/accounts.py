"""Authentication, profile and client-directory services."""

from loguru import logger

from portal.client.http import ApiClient
from portal.schemas.account import (
    ClientProfile,
    RegistrationRequest,
    TokenPair,
    UserInfo,
)

ADMIN_LANDING_PATH = "/admin/dashboard"
CUSTOMER_LANDING_PATH = "/dashboard"


def landing_path(user: UserInfo) -> str:
    """Page a user lands on after signing in."""
    return ADMIN_LANDING_PATH if user.is_staff else CUSTOMER_LANDING_PATH


async def get_current_user_service(client: ApiClient) -> UserInfo:
    """Fetch ``/me/`` and cache the answer in the session."""
    data = await client.get("/me/")
    user = UserInfo.model_validate(data)
    client.session.save_user(user)
    return user


async def _complete_login(tokens: TokenPair, client: ApiClient) -> UserInfo:
    client.session.save_tokens(tokens)
    user = await get_current_user_service(client)
    logger.bind(user_id=user.id, is_staff=user.is_staff).info(
        f"User {user.username} signed in"
    )
    return user


async def login_service(username: str, password: str, client: ApiClient) -> UserInfo:
    """Exchange credentials for tokens, then load the current user.

    Raises:
        UnauthorizedError: The credentials were rejected
    """
    data = await client.post(
        "/token/",
        json={"username": username, "password": password},
        error_message="Invalid username or password",
    )
    return await _complete_login(TokenPair.model_validate(data), client)


async def google_login_service(access_token: str, client: ApiClient) -> UserInfo:
    """Exchange a Google access token for API tokens."""
    client.session.clear()
    data = await client.post(
        "/auth/google/",
        json={"access_token": access_token},
        error_message="Google sign-in failed",
    )
    return await _complete_login(TokenPair.model_validate(data), client)


async def register_service(form: RegistrationRequest, client: ApiClient) -> UserInfo:
    """Create an account, then sign in with the same credentials."""
    await client.post(
        "/register/",
        json=form.model_dump(),
        error_message="Registration failed",
    )
    logger.bind(username=form.username).info("Account registered")
    return await login_service(form.username, form.password, client)


async def request_password_reset_service(email: str, client: ApiClient) -> None:
    """Ask the API to send a password reset link."""
    await client.post(
        "/password-reset/",
        json={"email": email},
        error_message="Unable to send the reset link",
    )


async def update_profile_service(email: str, client: ApiClient) -> UserInfo:
    """Save the profile email and cache the updated user."""
    data = await client.patch(
        "/me/", json={"email": email}, error_message="Unable to update the profile"
    )
    user = UserInfo.model_validate(data)
    client.session.save_user(user)
    return user


async def list_clients_service(client: ApiClient) -> list[ClientProfile]:
    data = await client.get("/clients/")
    return [ClientProfile.model_validate(item) for item in data or []]
