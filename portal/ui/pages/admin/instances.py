"""Admin instance fleet: counters, search and lifecycle actions."""

from nicegui import ui

from portal.core.instance_lifecycle import InstanceAction, InstanceLifecycle
from portal.schemas.account import UserInfo
from portal.schemas.instance import Instance
from portal.ui.auth.context import require_staff
from portal.ui.components.badge import instance_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.dialogs import confirm
from portal.ui.components.formatting import format_date
from portal.ui.components.instance_row import instance_link
from portal.ui.components.layout import frame
from portal.ui.components.stat_card import stat_card
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.instances import (
    filter_instances,
    list_instances_service,
    perform_instance_action_service,
    summarize_instances,
)


@ui.page("/admin/instances")
@require_staff
async def admin_instances_page(user: UserInfo) -> None:
    instances: list[Instance] = []
    search_term = ""

    async def handle_action(instance: Instance, action: InstanceAction) -> None:
        nonlocal instances
        confirmed = await confirm(
            InstanceLifecycle.confirmation_message(action),
            title=f"{action.label} {instance.name}",
            confirm_label=action.label,
            destructive=action is InstanceAction.DELETE,
        )
        if not confirmed:
            return
        updated = await run_action(
            lambda client: perform_instance_action_service(instance.id, action, client),
            error_title="Action failed",
        )
        if updated is None:
            return
        instances = updated
        fleet.refresh()
        ui.notify(f"{action.label} requested for {instance.name}", color="positive")

    def actions_cell(instance: Instance) -> None:
        with ui.button(icon="more_vert").props("flat round dense"):
            with ui.menu():
                for action in InstanceLifecycle.ADMIN_ACTIONS:
                    ui.menu_item(
                        action.label,
                        on_click=lambda i=instance, a=action: handle_action(i, a),
                    )

    columns: list[Column[Instance]] = [
        text_column("Name", lambda i: i.name),
        text_column("Client", lambda i: i.client_company or "-"),
        text_column("Plan", lambda i: i.subscription_plan or "-"),
        Column("URL", instance_link),
        text_column("Database", lambda i: i.db_name or "-"),
        text_column("Version", lambda i: i.version or "-"),
        Column("Status", instance_badge),
        text_column("Created", lambda i: format_date(i.created_at)),
        Column("", actions_cell, align="right"),
    ]

    @ui.refreshable
    def fleet() -> None:
        stats = summarize_instances(instances)
        with ui.row().classes("w-full gap-4"):
            stat_card("Total", stats.total, "dns")
            stat_card("Running", stats.running, "play_circle", "positive")
            stat_card("Pending", stats.pending, "hourglass_top", "warning")
            stat_card("Errors", stats.errors, "error", "negative")
        with ui.card().classes("w-full"):
            data_table(
                columns,
                filter_instances(instances, search_term),
                "No instance matches",
            )

    def handle_search(term: str | None) -> None:
        nonlocal search_term
        search_term = term or ""
        fleet.refresh()

    async def refresh() -> None:
        nonlocal instances
        fetched = await fetch(list_instances_service, "instances")
        if fetched is not None:
            instances = fetched
            fleet.refresh()

    with frame(user, "Instances"):
        with ui.row().classes("w-full items-center gap-2"):
            ui.input(
                placeholder="Search by name, client or database",
                on_change=lambda e: handle_search(e.value),
            ).props("clearable").classes("grow")
            ui.button(icon="refresh", on_click=refresh).props("flat round")
        fleet()

    await refresh()
