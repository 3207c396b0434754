"""Customer payment history."""

from nicegui import ui

from portal.schemas.account import UserInfo
from portal.schemas.billing import Payment
from portal.ui.auth.context import require_auth
from portal.ui.components.badge import payment_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.formatting import format_amount, format_datetime
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch
from portal.ui.services.payments import list_payments_service

PAYMENT_COLUMNS: list[Column[Payment]] = [
    text_column("Date", lambda p: format_datetime(p.payment_date)),
    text_column("Plan", lambda p: p.subscription_plan or "-"),
    text_column("Amount", lambda p: format_amount(p.amount)),
    text_column("Method", lambda p: p.method_label),
    Column("Status", payment_badge),
    text_column("Reference", lambda p: p.transaction_id or "-"),
]


@ui.page("/dashboard/billing")
@require_auth
async def billing_page(user: UserInfo) -> None:
    with frame(user, "Billing"):
        with ui.card().classes("w-full"):
            ui.label("Payment history").classes("text-lg font-bold")
            container = ui.column().classes("w-full")

    payments = await fetch(list_payments_service, "payments") or []
    with container:
        data_table(PAYMENT_COLUMNS, payments, "No payment yet")
