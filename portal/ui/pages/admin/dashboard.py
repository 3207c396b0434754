"""Admin overview: KPIs and most recent instances."""

from nicegui import ui

from portal.core.config import settings
from portal.schemas.account import UserInfo
from portal.schemas.instance import Instance
from portal.ui.auth.context import require_staff
from portal.ui.components.badge import instance_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.formatting import format_amount, format_date
from portal.ui.components.layout import frame
from portal.ui.components.stat_card import stat_card
from portal.ui.pages.common import fetch
from portal.ui.services.dashboard import load_admin_overview_service

RECENT_INSTANCE_COLUMNS: list[Column[Instance]] = [
    text_column("Name", lambda i: i.name),
    text_column("Client", lambda i: i.client_company or "-"),
    text_column("Plan", lambda i: i.subscription_plan or "-"),
    Column("Status", instance_badge),
    text_column("Created", lambda i: format_date(i.created_at)),
]


@ui.page("/admin/dashboard")
@require_staff
async def admin_dashboard_page(user: UserInfo) -> None:
    with frame(user, "Overview"):
        container = ui.column().classes("w-full gap-4")

    overview = await fetch(load_admin_overview_service, "admin overview")
    with container:
        if overview is None:
            ui.label("The overview is unavailable right now.").classes(
                "text-gray-500"
            )
            return

        with ui.row().classes("w-full gap-4"):
            stat_card("Clients", overview.total_clients, "groups")
            stat_card("Instances", overview.total_instances, "dns")
            stat_card("Plans", overview.active_plans, "sell")
            stat_card(
                "Forecast MRR", format_amount(overview.revenue), "euro", "positive"
            )

        with ui.row().classes("w-full gap-4"):
            stats = overview.instance_stats
            stat_card("Running", stats.running, "play_circle", "positive")
            stat_card("Pending", stats.pending, "hourglass_top", "warning")
            stat_card("Errors", stats.errors, "error", "negative")

        with ui.card().classes("w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Recent instances").classes("text-lg font-bold")
                ui.link("See all", "/admin/instances")
            data_table(
                RECENT_INSTANCE_COLUMNS,
                overview.recent_instances,
                "No instance yet",
            )
        ui.label(
            f"Forecast assumes {format_amount(settings.ESTIMATED_REVENUE_PER_INSTANCE)}"
            " per instance and month."
        ).classes("text-gray-400 text-xs")
