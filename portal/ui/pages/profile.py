"""Profile page shared by customers and staff."""

from nicegui import ui

from portal.schemas.account import UserInfo
from portal.ui.auth.context import require_auth
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.accounts import (
    get_current_user_service,
    update_profile_service,
)


@ui.page("/profile")
@require_auth
async def profile_page(user: UserInfo) -> None:
    """Shows the cached user at once, then refreshes it from the API."""
    with frame(user, "Profile"):
        with ui.card().classes("w-full max-w-xl"):
            ui.label("My profile").classes("text-lg font-bold")
            username_input = ui.input("Username", value=user.username).classes(
                "w-full"
            )
            username_input.disable()
            email_input = ui.input("Email", value=user.email).classes("w-full")
            ui.label(f"Role: {'Admin' if user.is_staff else 'Client'}").classes(
                "text-gray-500 text-sm"
            )
            save_button = ui.button("Save").classes("mt-2")

    async def handle_save() -> None:
        email = (email_input.value or "").strip()
        if not email:
            ui.notify("Email is required", color="warning")
            return
        updated = await run_action(
            lambda client: update_profile_service(email, client),
            error_title="Update failed",
        )
        if updated is not None:
            email_input.value = updated.email
            ui.notify("Profile updated", color="positive")

    save_button.on_click(handle_save)

    fresh = await fetch(get_current_user_service, "profile")
    if fresh is not None:
        username_input.value = fresh.username
        email_input.value = fresh.email
