"""Instance row and card components."""

from collections.abc import Awaitable, Callable

from nicegui import ui

from portal.core.config import settings
from portal.core.instance_lifecycle import InstanceAction, InstanceLifecycle
from portal.schemas.instance import Instance
from portal.ui.components.badge import instance_badge
from portal.ui.components.formatting import format_date

ActionHandler = Callable[[Instance, InstanceAction], Awaitable[None]]


def instance_link(instance: Instance) -> None:
    url = settings.instance_url(instance.port)
    if url and not instance.is_pending:
        ui.link(instance.domain or url, url, new_tab=True).classes("text-sm")
    else:
        ui.label(instance.domain or "-").classes("text-sm text-gray-500")


def instance_row(instance: Instance, on_action: ActionHandler) -> None:
    """Customer row: name, link, status and the start/stop and restart buttons.

    Buttons are disabled while the instance is being provisioned.
    """
    with ui.row().classes("w-full items-center justify-between border-b py-2"):
        with ui.column().classes("gap-0"):
            ui.label(instance.name).classes("font-medium")
            instance_link(instance)
        instance_badge(instance)
        with ui.row().classes("gap-1"):
            for action in InstanceLifecycle.row_actions(instance.status):
                button = ui.button(
                    action.label,
                    on_click=lambda i=instance, a=action: on_action(i, a),
                ).props("flat dense")
                if instance.is_pending:
                    button.disable()


def instance_card(instance: Instance) -> None:
    """Read-only card with the details of an instance."""
    url = settings.instance_url(instance.port)
    with ui.card().classes("w-full"):
        with ui.row().classes("w-full items-center justify-between"):
            ui.label(instance.name).classes("text-lg font-bold")
            instance_badge(instance)
        with ui.grid(columns=2).classes("w-full gap-x-6 gap-y-1 text-sm"):
            for label, value in (
                ("Plan", instance.subscription_plan or "-"),
                ("Domain", instance.domain or "-"),
                ("Version", instance.version or "-"),
                ("Database", instance.db_name or "-"),
                ("Created", format_date(instance.created_at)),
                ("Admin password", instance.admin_password or "-"),
            ):
                ui.label(label).classes("text-gray-500")
                ui.label(value)
        if url:
            ui.button(
                "Open",
                icon="open_in_new",
                on_click=lambda: ui.navigate.to(url, new_tab=True),
            ).props("outline").set_enabled(not instance.is_pending)
