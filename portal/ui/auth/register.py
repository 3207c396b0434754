"""Self-service registration page."""

from loguru import logger
from nicegui import ui
from pydantic import ValidationError

from portal.core.config import settings
from portal.core.exceptions import PortalApiError
from portal.schemas.account import RegistrationRequest
from portal.ui.auth.context import get_api_client
from portal.ui.services.accounts import CUSTOMER_LANDING_PATH, register_service


@ui.page("/register")
async def register_page() -> None:
    """Sign-up form; a successful registration signs the user in."""
    ui.page_title(f"Create an account | {settings.PROJECT_NAME}")

    with ui.card().classes("w-96 mx-auto mt-12"):
        ui.label("Create an account").classes("text-2xl font-bold mb-2")

        company_input = ui.input(label="Company name").classes("w-full")
        username_input = ui.input(label="Username").classes("w-full")
        email_input = ui.input(label="Email").classes("w-full").props("type=email")
        phone_input = ui.input(label="Phone").classes("w-full")
        password_input = (
            ui.input(label="Password")
            .classes("w-full")
            .props("type=password password-toggle-button")
        )

        error_label = ui.label("").classes("text-red-500 text-sm")
        error_label.set_visibility(False)
        submit_button = ui.button("Create account").classes("w-full mt-2")

        def show_error(message: str) -> None:
            error_label.text = message
            error_label.set_visibility(True)

        async def handle_register() -> None:
            try:
                form = RegistrationRequest(
                    username=(username_input.value or "").strip(),
                    email=(email_input.value or "").strip(),
                    password=password_input.value or "",
                    company_name=(company_input.value or "").strip(),
                    phone=(phone_input.value or "").strip(),
                )
            except ValidationError:
                show_error("All fields are required")
                return

            submit_button.disable()
            try:
                async with get_api_client(redirect_on_unauthorized=False) as client:
                    await register_service(form, client)
            except PortalApiError as e:
                logger.bind(username=form.username).info(
                    f"Registration rejected: {e.message}"
                )
                show_error(e.message_or("Registration failed"))
                return
            finally:
                submit_button.enable()

            ui.navigate.to(CUSTOMER_LANDING_PATH)
            ui.notify("Welcome aboard!", color="positive")

        submit_button.on_click(handle_register)
        password_input.on("keydown.enter", handle_register)

        with ui.row().classes("w-full justify-center mt-2 text-sm"):
            ui.label("Already registered?")
            ui.link("Sign in", "/login")
