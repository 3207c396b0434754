"""Customer instance details."""

from nicegui import ui

from portal.schemas.account import UserInfo
from portal.ui.auth.context import require_auth
from portal.ui.components.instance_row import instance_card
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch
from portal.ui.services.instances import list_instances_service


@ui.page("/dashboard/instances")
@require_auth
async def instances_page(user: UserInfo) -> None:
    with frame(user, "My instances"):
        container = ui.column().classes("w-full gap-4")

    instances = await fetch(list_instances_service, "instances") or []
    with container:
        if not instances:
            ui.label("You have no instance yet.").classes("text-gray-500")
            ui.button("Deploy one", on_click=lambda: ui.navigate.to("/dashboard"))
        for instance in instances:
            instance_card(instance)
