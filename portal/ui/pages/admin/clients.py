"""Admin client directory."""

from nicegui import ui

from portal.schemas.account import ClientProfile, UserInfo
from portal.ui.auth.context import require_staff
from portal.ui.components.badge import status_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.formatting import format_date
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch
from portal.ui.services.accounts import list_clients_service


def _subscription_cell(client: ClientProfile) -> None:
    subscription = client.active_subscription
    if subscription is None:
        ui.label("No subscription").classes("text-gray-400")
        return
    status_badge(subscription.plan_name, "success")


CLIENT_COLUMNS: list[Column[ClientProfile]] = [
    text_column("Company", lambda c: c.company_name),
    text_column("Username", lambda c: c.user.username),
    text_column("Email", lambda c: c.user.email or "-"),
    text_column("Phone", lambda c: c.phone or "-"),
    Column("Plan", _subscription_cell),
    text_column("Joined", lambda c: format_date(c.created_at)),
]


@ui.page("/admin/clients")
@require_staff
async def admin_clients_page(user: UserInfo) -> None:
    with frame(user, "Clients"):
        with ui.card().classes("w-full"):
            ui.label("Client directory").classes("text-lg font-bold")
            container = ui.column().classes("w-full")

    clients = await fetch(list_clients_service, "clients") or []
    with container:
        data_table(CLIENT_COLUMNS, clients, "No client registered")
