"""Customer subscription overview."""

from nicegui import ui

from portal.schemas.account import UserInfo
from portal.ui.auth.context import require_auth
from portal.ui.components.badge import subscription_badge
from portal.ui.components.formatting import format_amount, format_date
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch
from portal.ui.services.subscriptions import (
    list_subscriptions_service,
    select_current_subscription,
)


@ui.page("/dashboard/subscription")
@require_auth
async def subscription_page(user: UserInfo) -> None:
    with frame(user, "Subscription"):
        container = ui.column().classes("w-full gap-4")

    subscriptions = await fetch(list_subscriptions_service, "subscriptions") or []
    subscription = select_current_subscription(subscriptions)

    with container:
        if subscription is None:
            with ui.card().classes("w-full items-center"):
                ui.label("You have no subscription yet.").classes("text-gray-500")
                ui.button(
                    "See plans", on_click=lambda: ui.navigate.to("/dashboard/plans")
                )
            return

        with ui.card().classes("w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label(subscription.plan_name or "Subscription").classes(
                    "text-xl font-bold"
                )
                subscription_badge(subscription)
            with ui.grid(columns=2).classes("w-full gap-x-6 gap-y-1 text-sm"):
                for label, value in (
                    ("Price", format_amount(subscription.plan_price)),
                    ("Billing cycle", subscription.billing_cycle.capitalize()),
                    ("Started", format_date(subscription.start_date)),
                    ("Ends", format_date(subscription.end_date)),
                    ("Next invoice", format_date(subscription.next_billing_date)),
                    ("Auto renew", "Yes" if subscription.auto_renew else "No"),
                    ("Total paid", format_amount(subscription.total_paid)),
                    ("Amount due", format_amount(subscription.amount_due)),
                ):
                    ui.label(label).classes("text-gray-500")
                    ui.label(value)
            if subscription.is_pending:
                ui.label(
                    "Your subscription is waiting for its first payment."
                ).classes("text-warning")
                ui.button(
                    "Make a payment",
                    icon="payments",
                    on_click=lambda: ui.navigate.to(
                        f"/dashboard/payment?subscription={subscription.id}"
                    ),
                )

        if subscription.plan_allowed_modules:
            with ui.card().classes("w-full"):
                ui.label("Included modules").classes("text-lg font-bold")
                with ui.row().classes("gap-1"):
                    for module in subscription.plan_allowed_modules:
                        ui.chip(module).props("dense outline")
