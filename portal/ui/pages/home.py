"""Public landing page."""

from nicegui import ui

from portal.core.config import settings
from portal.ui.auth.context import get_session_store
from portal.ui.services.accounts import landing_path


@ui.page("/")
async def home_page() -> None:
    session = get_session_store()
    user = session.user
    if session.is_authenticated and user is not None:
        ui.navigate.to(landing_path(user))
        return

    ui.page_title(settings.PROJECT_NAME)
    with ui.column().classes("w-full items-center mt-24 gap-4"):
        ui.label(settings.PROJECT_NAME).classes("text-4xl font-bold")
        ui.label("Launch, bill and monitor your hosted environments.").classes(
            "text-lg text-gray-600"
        )
        with ui.row().classes("gap-2"):
            ui.button("Sign in", on_click=lambda: ui.navigate.to("/login"))
            ui.button(
                "Create an account", on_click=lambda: ui.navigate.to("/register")
            ).props("outline")
        ui.link(f"Contact {settings.SUPPORT_EMAIL}", f"mailto:{settings.SUPPORT_EMAIL}")
