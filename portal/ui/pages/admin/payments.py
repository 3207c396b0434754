"""Admin payment validation."""

from collections.abc import Awaitable, Callable

from nicegui import ui

from portal.client.http import ApiClient
from portal.schemas.account import UserInfo
from portal.schemas.billing import Payment
from portal.ui.auth.context import require_staff
from portal.ui.components.badge import payment_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.dialogs import alert, confirm
from portal.ui.components.formatting import format_amount, format_datetime
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.payments import (
    list_payments_service,
    reject_payment_service,
    split_payments,
    validate_payment_service,
)

PaymentDecision = Callable[[int, ApiClient], Awaitable[list[Payment]]]


@ui.page("/admin/payments")
@require_staff
async def admin_payments_page(user: UserInfo) -> None:
    payments: list[Payment] = []

    async def decide(
        payment: Payment,
        decision: PaymentDecision,
        verb: str,
        done_message: str,
    ) -> None:
        nonlocal payments
        if not await confirm(
            f"{verb} the payment of {format_amount(payment.amount)} "
            f"from {payment.client_company or 'this client'}?",
            title=f"{verb} payment",
            confirm_label=verb,
            destructive=decision is reject_payment_service,
        ):
            return
        updated = await run_action(
            lambda client: decision(payment.id, client),
            error_title=f"{verb} failed",
        )
        if updated is None:
            return
        await alert(done_message, title="Done", variant="success")
        payments = updated
        payment_lists.refresh()

    def decision_cell(payment: Payment) -> None:
        with ui.row().classes("gap-1 justify-end"):
            ui.button(
                "Validate",
                color="positive",
                on_click=lambda: decide(
                    payment,
                    validate_payment_service,
                    "Validate",
                    "Payment validated. The subscription is now active.",
                ),
            ).props("dense")
            ui.button(
                "Reject",
                color="negative",
                on_click=lambda: decide(
                    payment, reject_payment_service, "Reject", "Payment rejected."
                ),
            ).props("dense outline")

    base_columns: list[Column[Payment]] = [
        text_column("Client", lambda p: p.client_company or "-"),
        text_column("Plan", lambda p: p.subscription_plan or "-"),
        text_column("Amount", lambda p: format_amount(p.amount)),
        text_column("Method", lambda p: p.method_label),
        text_column("Date", lambda p: format_datetime(p.payment_date)),
    ]
    pending_columns = [*base_columns, Column("", decision_cell, align="right")]
    history_columns = [
        *base_columns,
        Column("Status", payment_badge),
        text_column("Reference", lambda p: p.transaction_id or "-"),
    ]

    @ui.refreshable
    def payment_lists() -> None:
        pending, history = split_payments(payments)
        with ui.card().classes("w-full"):
            ui.label(f"Awaiting validation ({len(pending)})").classes(
                "text-lg font-bold"
            )
            data_table(pending_columns, pending, "No payment awaiting validation")
        with ui.card().classes("w-full"):
            ui.label("History").classes("text-lg font-bold")
            data_table(history_columns, history, "No payment yet")

    with frame(user, "Payments"):
        payment_lists()

    payments = await fetch(list_payments_service, "payments") or []
    payment_lists.refresh()
