"""Fetch and action wrappers shared by the pages.

Background fetches log failures and keep whatever the page already shows.
Actions surface failures in a blocking dialog.
"""

from collections.abc import Awaitable, Callable

from loguru import logger
from pydantic import ValidationError

from portal.client.http import ApiClient
from portal.core.exceptions import PortalApiError, UnauthorizedError
from portal.ui.auth.context import get_api_client
from portal.ui.components.dialogs import alert, report_error

UNEXPECTED_RESPONSE_MESSAGE = "The service returned an unexpected response"


async def fetch[T](loader: Callable[[ApiClient], Awaitable[T]], what: str) -> T | None:
    """Run a background fetch; returns None when it failed."""
    try:
        async with get_api_client() as client:
            return await loader(client)
    except UnauthorizedError:
        return None
    except PortalApiError as e:
        logger.bind(status_code=e.status_code).error(
            f"Unable to load {what}: {e.message}"
        )
        return None
    except ValidationError as e:
        logger.error(f"Unable to load {what}: malformed API response: {e}")
        return None


async def run_action[T](
    action: Callable[[ApiClient], Awaitable[T]],
    error_title: str = "Error",
) -> T | None:
    """Run a user action; returns None when it failed and the user was told.

    ``ValueError`` raised by the action is a rejected form value and is shown
    as is. A response that does not match its schema is logged and reported
    with a generic message.
    """
    try:
        async with get_api_client() as client:
            return await action(client)
    except ValidationError as e:
        logger.error(f"Malformed API response: {e}")
        await alert(UNEXPECTED_RESPONSE_MESSAGE, title=error_title, variant="error")
        return None
    except ValueError as e:
        await alert(str(e), title=error_title, variant="warning")
        return None
    except PortalApiError as e:
        await report_error(e, title=error_title)
        return None
