"""Payment of a subscription: manual declaration or hosted card checkout."""

from decimal import Decimal, InvalidOperation

from nicegui import ui

from portal.core.config import settings
from portal.schemas.account import UserInfo
from portal.ui.auth.context import require_auth
from portal.ui.components.dialogs import alert
from portal.ui.components.formatting import format_amount
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.payments import (
    start_card_checkout_service,
    submit_manual_payment_service,
)
from portal.ui.services.subscriptions import (
    default_payment_amount,
    find_payable_subscription_service,
)

SUBSCRIPTION_PATH = "/dashboard/subscription"


def parse_amount(value: object) -> Decimal:
    """Amount typed in the form, or zero when it is not a number."""
    try:
        return Decimal(str(value or 0))
    except InvalidOperation:
        return Decimal(0)


@ui.page("/dashboard/payment")
@require_auth
async def payment_page(user: UserInfo, subscription: int | None = None) -> None:
    """Settle ``?subscription=<id>``, or the first PENDING subscription."""
    with frame(user, "Payment"):
        container = ui.column().classes("w-full max-w-xl gap-4")

    payable = await fetch(
        lambda client: find_payable_subscription_service(client, subscription),
        "subscription to pay",
    )

    with container:
        if payable is None:
            with ui.card().classes("w-full items-center"):
                ui.label("There is nothing to pay.").classes("text-gray-500")
                ui.button(
                    "Back to my subscription",
                    on_click=lambda: ui.navigate.to(SUBSCRIPTION_PATH),
                )
            return

        with ui.card().classes("w-full"):
            ui.label(payable.plan_name or "Subscription").classes("text-xl font-bold")
            ui.label(f"Plan price: {format_amount(payable.plan_price)}").classes(
                "text-gray-600"
            )
            if payable.has_amount_due:
                ui.label(f"Amount due: {format_amount(payable.amount_due)}")

            amount_input = ui.number(
                label=f"Amount ({settings.CURRENCY_SYMBOL})",
                value=float(default_payment_amount(payable)),
                min=0,
                step=0.01,
                format="%.2f",
            ).classes("w-full")
            method = ui.radio(
                {"MANUAL": "Manual payment (bank transfer)", "CARD": "Card"},
                value="MANUAL",
            )
            pay_button = ui.button("Pay", icon="payments").classes("w-full")

        async def handle_pay() -> None:
            amount = parse_amount(amount_input.value)
            pay_button.disable()
            try:
                if method.value == "CARD":
                    url = await run_action(
                        lambda client: start_card_checkout_service(
                            payable.id, amount, client
                        ),
                        error_title="Payment failed",
                    )
                    if url:
                        ui.navigate.to(url)
                    return

                payment = await run_action(
                    lambda client: submit_manual_payment_service(
                        payable.id, amount, client
                    ),
                    error_title="Payment failed",
                )
                if payment is None:
                    return
                await alert(
                    "Your payment has been recorded and is awaiting validation.",
                    title="Payment recorded",
                    variant="success",
                )
                ui.navigate.to(SUBSCRIPTION_PATH)
            finally:
                pay_button.enable()

        pay_button.on_click(handle_pay)


@ui.page("/dashboard/payment/success")
@require_auth
async def payment_success_page(user: UserInfo, session_id: str | None = None) -> None:
    """Landing page of a completed card checkout.

    Without a checkout ``session_id`` the page redirects immediately.
    """
    if not session_id:
        ui.navigate.to(SUBSCRIPTION_PATH)
        return

    remaining = settings.PAYMENT_SUCCESS_REDIRECT_SECONDS

    with frame(user, "Payment"):
        with ui.card().classes("w-full max-w-xl items-center"):
            ui.icon("check_circle", size="xl").classes("text-positive")
            ui.label("Payment successful").classes("text-2xl font-bold")
            ui.label("Thank you! Your subscription will be activated shortly.")
            countdown = ui.label(f"Redirecting in {remaining} s").classes(
                "text-gray-500"
            )
            ui.button(
                "Go to my subscription",
                on_click=lambda: ui.navigate.to(SUBSCRIPTION_PATH),
            )

    def tick() -> None:
        nonlocal remaining
        remaining -= 1
        if remaining <= 0:
            timer.deactivate()
            ui.navigate.to(SUBSCRIPTION_PATH)
            return
        countdown.text = f"Redirecting in {remaining} s"

    if remaining <= 0:
        ui.navigate.to(SUBSCRIPTION_PATH)
        return
    timer = ui.timer(1.0, tick)
