"""Async client for the provisioning REST API.

Every request goes through one ``httpx.AsyncClient`` whose event hooks:

- attach ``Authorization: Bearer <access>`` when a token is stored, except on
  the authentication routes themselves
- clear the persisted session and notify ``on_unauthorized`` on any 401

Non-2xx responses are raised as :class:`PortalApiError` carrying the server's
message; transport failures are raised as :class:`ApiUnavailableError`.
"""

from collections.abc import Callable
from types import TracebackType
from typing import Any, Self

import httpx
from loguru import logger

from portal.client.session import SessionStore
from portal.core.config import settings
from portal.core.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    ApiUnavailableError,
    PortalApiError,
    UnauthorizedError,
)

# Path fragments of the routes that must never carry a bearer token
AUTH_ROUTE_MARKERS = ("/token/", "/register/", "/auth/google/")

UnauthorizedHandler = Callable[[], None]


def is_auth_route(path: str) -> bool:
    """Whether ``path`` targets an authentication route."""
    return any(marker in path for marker in AUTH_ROUTE_MARKERS)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:
    """Provisioning API client bound to one browser session.

    Args:
        session: Persisted session holding the tokens.
        base_url: API root; defaults to ``settings.API_BASE_URL``.
        timeout: Request timeout in seconds; defaults to
            ``settings.API_TIMEOUT_SECONDS``.
        on_unauthorized: Called after the session has been cleared on a 401.
            Pages pass a redirect to the login page; the login form passes None.
        transport: Optional httpx transport, used by tests to fake the API.
    """

    def __init__(
        self,
        session: SessionStore,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        on_unauthorized: UnauthorizedHandler | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.session = session
        self._on_unauthorized = on_unauthorized
        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.API_BASE_URL).rstrip("/"),
            timeout=timeout or settings.API_TIMEOUT_SECONDS,
            headers={"Accept": "application/json"},
            event_hooks={
                "request": [self._attach_token],
                "response": [self._reset_on_unauthorized],
            },
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _attach_token(self, request: httpx.Request) -> None:
        token = self.session.access_token
        if token and not is_auth_route(request.url.path):
            request.headers["Authorization"] = f"Bearer {token}"
        logger.debug(f"API request: {request.method} {request.url.path}")

    async def _reset_on_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code != httpx.codes.UNAUTHORIZED:
            return
        logger.bind(path=response.request.url.path).warning(
            "API answered 401, clearing session"
        )
        self.session.clear()
        if self._on_unauthorized is not None:
            self._on_unauthorized()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the API root, e.g. ``/instances/``
            json: Optional JSON body
            params: Optional query parameters
            error_message: Message used when an error response carries none

        Returns:
            Any: Decoded body, or None for an empty response

        Raises:
            UnauthorizedError: The API answered 401
            PortalApiError: The API answered with any other non-2xx status
            ApiUnavailableError: The API could not be reached
        """
        try:
            response = await self._client.request(
                method, path, json=json, params=params
            )
        except httpx.TransportError as e:
            logger.bind(path=path).error(f"API unreachable: {e}")
            raise ApiUnavailableError(
                "The service is unreachable, please try again later"
            ) from e

        payload = _decode(response)
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise UnauthorizedError.from_payload(
                response.status_code, payload, "Your session has expired"
            )
        if response.is_error:
            logger.bind(path=path, status_code=response.status_code).info(
                "API request failed"
            )
            raise PortalApiError.from_payload(
                response.status_code, payload, error_message
            )
        return payload

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)
