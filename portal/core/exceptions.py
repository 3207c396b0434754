"""Errors raised while talking to the provisioning API.

The API is the only source of truth, so every failure the portal can report is
either a non-2xx response, a transport failure, or a form that never left the
browser. Pages show ``exc.message`` verbatim to the user.
"""

from typing import Any

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"

# Keys the API uses for a human readable error, in order of preference
MESSAGE_KEYS = ("error", "detail", "message")


def extract_error_message(payload: Any, fallback: str = DEFAULT_ERROR_MESSAGE) -> str:
    """Extract the server-provided error message from a response payload.

    Precedence:
    - ``error`` then ``detail`` then ``message`` when one of them is a non-empty string
    - the first message of a field-error payload (``{"field": ["msg", ...]}``)
    - a plain string payload
    - ``fallback``

    Args:
        payload: Decoded JSON body (or raw text) of an error response
        fallback: Message used when nothing usable is found

    Returns:
        str: Message to show to the user
    """
    if isinstance(payload, str):
        return payload.strip() or fallback

    if not isinstance(payload, dict) or not payload:
        return fallback

    for key in MESSAGE_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value

    first = next(iter(payload.values()))
    if isinstance(first, list) and first:
        return str(first[0])
    if isinstance(first, str) and first.strip():
        return first

    return fallback


class PortalApiError(Exception):
    """Error returned by (or while reaching) the provisioning API.

    Attributes:
        status_code: HTTP status of the response, None for transport failures.
        payload: Decoded response body, None when there was no body.
        message: Message to display to the user.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)

    @classmethod
    def from_payload(
        cls,
        status_code: int,
        payload: Any,
        fallback: str = DEFAULT_ERROR_MESSAGE,
    ) -> "PortalApiError":
        """Build an error whose message comes from the response payload."""
        return cls(
            extract_error_message(payload, fallback),
            status_code=status_code,
            payload=payload,
        )

    def message_or(self, fallback: str) -> str:
        """Return the server message, or ``fallback`` when the server gave none."""
        if self.payload is None or self.message == DEFAULT_ERROR_MESSAGE:
            return fallback
        return self.message


class UnauthorizedError(PortalApiError):
    """The API answered 401. The persisted session has already been cleared."""


class ApiUnavailableError(PortalApiError):
    """The API could not be reached (connection refused, timeout, DNS...)."""


class CheckoutUnavailableError(PortalApiError):
    """A card checkout was requested but the API returned no redirect URL."""
