"""Admin subscription management."""

import asyncio
from datetime import date

from nicegui import ui
from pydantic import ValidationError

from portal.client.http import ApiClient
from portal.schemas.account import ClientProfile, UserInfo
from portal.schemas.billing import (
    BillingCycle,
    Plan,
    Subscription,
    SubscriptionIn,
    SubscriptionStatus,
)
from portal.ui.auth.context import require_staff
from portal.ui.components.badge import subscription_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.formatting import format_amount, format_date
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.accounts import list_clients_service
from portal.ui.services.plans import list_plans_service
from portal.ui.services.subscriptions import (
    list_subscriptions_service,
    save_subscription_service,
)


async def _load_directory(
    client: ApiClient,
) -> tuple[list[Subscription], list[ClientProfile], list[Plan]]:
    subscriptions, clients, plans = await asyncio.gather(
        list_subscriptions_service(client),
        list_clients_service(client),
        list_plans_service(client),
    )
    return subscriptions, clients, plans


async def edit_subscription_dialog(
    clients: list[ClientProfile],
    plans: list[Plan],
    subscription: Subscription | None = None,
) -> SubscriptionIn | None:
    """Subscription editor; returns the edited fields, or None when cancelled."""
    initial = (
        SubscriptionIn.from_subscription(subscription)
        if subscription is not None
        else None
    )

    with ui.dialog() as dialog, ui.card().classes("w-[28rem]"):
        ui.label("Edit subscription" if subscription else "New subscription").classes(
            "text-lg font-bold"
        )
        client_select = ui.select(
            {c.id: c.company_name for c in clients},
            label="Client",
            value=initial.client if initial else None,
        ).classes("w-full")
        plan_select = ui.select(
            {p.id: p.name for p in plans},
            label="Plan",
            value=initial.plan if initial else None,
        ).classes("w-full")
        status_select = ui.select(
            [s.value for s in SubscriptionStatus],
            label="Status",
            value=(initial.status if initial else SubscriptionStatus.ACTIVE).value,
        ).classes("w-full")
        cycle_select = ui.select(
            [c.value for c in BillingCycle],
            label="Billing cycle",
            value=(initial.billing_cycle if initial else BillingCycle.MONTHLY).value,
        ).classes("w-full")
        end_date_input = ui.input(
            "End date (YYYY-MM-DD)",
            value=initial.end_date.isoformat() if initial and initial.end_date else "",
        ).classes("w-full")
        auto_renew_switch = ui.switch(
            "Auto renew", value=initial.auto_renew if initial else True
        )

        error_label = ui.label("").classes("text-red-500 text-sm")
        error_label.set_visibility(False)

        def submit() -> None:
            try:
                end_date = (
                    date.fromisoformat(end_date_input.value)
                    if end_date_input.value
                    else None
                )
                result = SubscriptionIn(
                    client=client_select.value,
                    plan=plan_select.value,
                    end_date=end_date,
                    status=status_select.value,
                    auto_renew=auto_renew_switch.value,
                    billing_cycle=cycle_select.value,
                )
            except (ValidationError, ValueError):
                error_label.text = "Please pick a client, a plan and a valid date"
                error_label.set_visibility(True)
                return
            dialog.submit(result)

        with ui.row().classes("w-full justify-end gap-2 mt-2"):
            ui.button("Cancel", on_click=lambda: dialog.submit(None)).props("flat")
            ui.button("Save", on_click=submit)

    result = await dialog
    dialog.delete()
    return result


@ui.page("/admin/subscriptions")
@require_staff
async def admin_subscriptions_page(user: UserInfo) -> None:
    subscriptions: list[Subscription] = []
    clients: list[ClientProfile] = []
    plans: list[Plan] = []

    async def handle_save(subscription: Subscription | None = None) -> None:
        nonlocal subscriptions
        edited = await edit_subscription_dialog(clients, plans, subscription)
        if edited is None:
            return
        subscription_id = subscription.id if subscription is not None else None
        updated = await run_action(
            lambda client: save_subscription_service(edited, client, subscription_id),
            error_title="Unable to save the subscription",
        )
        if updated is None:
            return
        subscriptions = updated
        subscription_table.refresh()
        ui.notify("Subscription saved", color="positive")

    columns: list[Column[Subscription]] = [
        text_column("Client", lambda s: s.client_company or "-"),
        text_column("Plan", lambda s: s.plan_name or "-"),
        Column("Status", subscription_badge),
        text_column("Cycle", lambda s: s.billing_cycle.capitalize()),
        text_column("Start", lambda s: format_date(s.start_date)),
        text_column("End", lambda s: format_date(s.end_date)),
        text_column("Paid", lambda s: format_amount(s.total_paid)),
        text_column("Due", lambda s: format_amount(s.amount_due)),
        Column(
            "",
            lambda s: ui.button(icon="edit", on_click=lambda: handle_save(s)).props(
                "flat round dense"
            ),
            align="right",
        ),
    ]

    @ui.refreshable
    def subscription_table() -> None:
        data_table(columns, subscriptions, "No subscription yet")

    with frame(user, "Subscriptions"):
        with ui.row().classes("w-full justify-end"):
            ui.button("New subscription", icon="add", on_click=lambda: handle_save())
        with ui.card().classes("w-full"):
            subscription_table()

    loaded = await fetch(_load_directory, "subscriptions")
    if loaded is not None:
        subscriptions, clients, plans = loaded
        subscription_table.refresh()
