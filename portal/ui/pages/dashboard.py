"""Customer dashboard: instances with live status, plans and quick deployment."""

from nicegui import ui

from portal.core.config import settings
from portal.core.instance_lifecycle import InstanceAction
from portal.schemas.account import UserInfo
from portal.schemas.billing import Plan
from portal.schemas.instance import Instance
from portal.ui.auth.context import require_auth
from portal.ui.components.deployment_form import deployment_form
from portal.ui.components.instance_row import instance_row
from portal.ui.components.layout import frame
from portal.ui.components.plan_card import plan_card
from portal.ui.components.stat_card import stat_card
from portal.ui.pages.common import fetch, run_action
from portal.ui.pages.plans import choose_plan
from portal.ui.services.instances import (
    create_instance_service,
    list_instances_service,
    perform_instance_action_service,
    summarize_instances,
)
from portal.ui.services.plans import active_plans, list_plans_service


@ui.page("/dashboard")
@require_auth
async def dashboard_page(user: UserInfo) -> None:
    """Instance list refreshed every ``INSTANCE_POLL_INTERVAL_SECONDS``.

    Each tick re-fetches the whole list; a slow tick is simply superseded by
    the next one.
    """
    instances: list[Instance] = []
    plans: list[Plan] = []

    async def refresh_instances() -> None:
        nonlocal instances
        fetched = await fetch(list_instances_service, "instances")
        if fetched is not None:
            instances = fetched
            instance_panel.refresh()

    async def handle_action(instance: Instance, action: InstanceAction) -> None:
        nonlocal instances
        updated = await run_action(
            lambda client: perform_instance_action_service(instance.id, action, client),
            error_title="Action failed",
        )
        if updated is None:
            return
        instances = updated
        instance_panel.refresh()
        ui.notify(f"{action.label} requested for {instance.name}")

    async def handle_deploy(name: str) -> bool:
        nonlocal instances
        updated = await run_action(
            lambda client: create_instance_service(name, client),
            error_title="Deployment failed",
        )
        if updated is None:
            return False
        instances = updated
        instance_panel.refresh()
        ui.notify("Deployment started", color="positive")
        return True

    @ui.refreshable
    def instance_panel() -> None:
        stats = summarize_instances(instances)
        with ui.row().classes("w-full gap-4"):
            stat_card("Running", stats.running, "play_circle", "positive")
            stat_card("Pending", stats.pending, "hourglass_top", "warning")
            stat_card("Total", stats.total, "dns")
        with ui.card().classes("w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("My instances").classes("text-lg font-bold")
                ui.button(icon="refresh", on_click=refresh_instances).props(
                    "flat round"
                ).tooltip("Refresh")
            if not instances:
                ui.label("No instance yet. Deploy your first one below.").classes(
                    "text-gray-500"
                )
            for instance in instances:
                instance_row(instance, handle_action)

    @ui.refreshable
    def plan_panel() -> None:
        offered = active_plans(plans)
        if not offered:
            return
        ui.label("Plans").classes("text-lg font-bold")
        with ui.row().classes("w-full gap-4"):
            for plan in offered:
                plan_card(plan, on_choose=choose_plan)

    with frame(user, "Dashboard"):
        ui.label(f"Welcome, {user.display_name}").classes("text-2xl font-bold")
        instance_panel()
        deployment_form(handle_deploy)
        plan_panel()

    await refresh_instances()
    plans = await fetch(list_plans_service, "plans") or []
    plan_panel.refresh()

    ui.timer(settings.INSTANCE_POLL_INTERVAL_SECONDS, refresh_instances)
