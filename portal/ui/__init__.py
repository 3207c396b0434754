"""NiceGUI web interface.

Mounts the NiceGUI pages on the FastAPI application at the root path and
guards the signed-in pages with the authentication middleware.
"""

from typing import Any

from fastapi import FastAPI
from nicegui import app as nicegui_app
from nicegui import ui

from portal.core.config import Settings, settings
from portal.ui.auth.middleware import register_auth_middleware


def session_middleware_options(config: Settings) -> dict[str, Any]:
    """Options of the session cookie backing ``app.storage.user``."""
    return {"https_only": config.cookies_secure, "same_site": "lax"}


def setup_nicegui_interface(app: FastAPI) -> None:
    """Initialize the NiceGUI interface for the FastAPI application.

    Middleware order is critical: the auth guard is registered on the NiceGUI
    application first, then ``ui.run_with`` installs NiceGUI's request tracking
    and session middlewares around it so ``app.storage.user`` is available
    inside the guard.

    Args:
        app: The FastAPI application instance to integrate NiceGUI with.
    """
    register_auth_middleware(nicegui_app)

    # Import page modules to trigger @ui.page registration
    from portal.ui.auth import forgot_password, login, register
    from portal.ui.pages import (
        billing,
        dashboard,
        home,
        instances,
        payment,
        plans,
        profile,
        subscription,
    )
    from portal.ui.pages.admin import clients, payments, subscriptions
    from portal.ui.pages.admin import dashboard as admin_dashboard
    from portal.ui.pages.admin import instances as admin_instances
    from portal.ui.pages.admin import plans as admin_plans

    _ = (forgot_password, login, register)
    _ = (billing, dashboard, home, instances, payment, plans, profile, subscription)
    _ = (admin_dashboard, admin_instances, admin_plans)
    _ = (clients, payments, subscriptions)

    ui.run_with(
        app,
        title=settings.PROJECT_NAME,
        mount_path="/",
        storage_secret=settings.SECRET_KEY,
        session_middleware_kwargs=session_middleware_options(settings),
        favicon="🚀",
    )
