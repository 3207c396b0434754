"""Password reset request page."""

from nicegui import ui

from portal.core.config import settings
from portal.core.exceptions import PortalApiError
from portal.ui.auth.context import get_api_client
from portal.ui.services.accounts import request_password_reset_service

RESET_CONFIRMATION = (
    "If an account exists for this address, a reset link has been sent."
)


@ui.page("/forgot-password")
async def forgot_password_page() -> None:
    ui.page_title(f"Forgot password | {settings.PROJECT_NAME}")

    with ui.card().classes("w-96 mx-auto mt-20"):
        ui.label("Forgot your password?").classes("text-2xl font-bold")
        ui.label("Enter your email to receive a reset link.").classes(
            "text-gray-500 mb-2"
        )
        email_input = ui.input(label="Email").classes("w-full").props("type=email")
        message_label = ui.label("").classes("text-sm")
        message_label.set_visibility(False)
        submit_button = ui.button("Send reset link").classes("w-full mt-2")

        async def handle_submit() -> None:
            email = (email_input.value or "").strip()
            if not email:
                message_label.text = "Email is required"
                message_label.classes(replace="text-sm text-red-500")
                message_label.set_visibility(True)
                return

            submit_button.disable()
            try:
                async with get_api_client(redirect_on_unauthorized=False) as client:
                    await request_password_reset_service(email, client)
            except PortalApiError as e:
                message_label.text = e.message
                message_label.classes(replace="text-sm text-red-500")
            else:
                message_label.text = RESET_CONFIRMATION
                message_label.classes(replace="text-sm text-green-600")
            finally:
                submit_button.enable()
            message_label.set_visibility(True)

        submit_button.on_click(handle_submit)
        email_input.on("keydown.enter", handle_submit)

        ui.link("Back to sign in", "/login").classes("text-sm mt-2")
