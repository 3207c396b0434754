"""Blocking confirmation and alert dialogs."""

from nicegui import ui

from portal.core.exceptions import PortalApiError, UnauthorizedError
from portal.ui.components.badge import VARIANT_COLORS


async def confirm(
    message: str,
    title: str = "Confirmation",
    confirm_label: str = "Confirm",
    destructive: bool = False,
) -> bool:
    """Show a confirmation dialog and wait for the answer."""
    with ui.dialog() as dialog, ui.card().classes("w-96"):
        ui.label(title).classes("text-lg font-bold")
        ui.label(message).classes("text-gray-600")
        with ui.row().classes("w-full justify-end gap-2 mt-4"):
            ui.button("Cancel", on_click=lambda: dialog.submit(False)).props("flat")
            ui.button(
                confirm_label,
                color="negative" if destructive else "primary",
                on_click=lambda: dialog.submit(True),
            )
    result = await dialog
    dialog.delete()
    return bool(result)


async def alert(
    message: str, title: str = "Information", variant: str = "info"
) -> None:
    """Show a message and wait until it is dismissed."""
    with ui.dialog() as dialog, ui.card().classes("w-96"):
        color = VARIANT_COLORS.get(variant, "info")
        ui.label(title).classes(f"text-lg font-bold text-{color}")
        ui.label(message)
        with ui.row().classes("w-full justify-end mt-4"):
            ui.button("OK", on_click=lambda: dialog.submit(None))
    await dialog
    dialog.delete()


async def report_error(exc: PortalApiError, title: str = "Error") -> None:
    """Surface an API error verbatim.

    A 401 shows nothing: the session is gone and navigation to the login page
    is already under way.
    """
    if isinstance(exc, UnauthorizedError):
        return
    await alert(exc.message, title=title, variant="error")
