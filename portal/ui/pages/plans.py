"""Customer plan catalogue."""

from nicegui import ui

from portal.schemas.account import UserInfo
from portal.schemas.billing import Plan
from portal.ui.auth.context import require_auth
from portal.ui.components.layout import frame
from portal.ui.components.plan_card import plan_card
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.plans import active_plans, list_plans_service
from portal.ui.services.subscriptions import subscribe_to_plan_service

SUBSCRIPTION_PATH = "/dashboard/subscription"


async def choose_plan(plan: Plan) -> None:
    """Subscribe to ``plan`` and show the resulting subscription."""
    subscription = await run_action(
        lambda client: subscribe_to_plan_service(plan.id, client),
        error_title="Subscription failed",
    )
    if subscription is None:
        return
    ui.notify(f"Subscribed to {plan.name}", color="positive")
    ui.navigate.to(SUBSCRIPTION_PATH)


@ui.page("/dashboard/plans")
@require_auth
async def plans_page(user: UserInfo) -> None:
    with frame(user, "Plans"):
        ui.label("Choose the plan that fits your team.").classes("text-gray-600")
        container = ui.row().classes("w-full gap-4")

    plans = await fetch(list_plans_service, "plans")
    with container:
        offered = active_plans(plans or [])
        if not offered:
            ui.label("No plan is available at the moment.").classes("text-gray-500")
        for plan in offered:
            plan_card(plan, on_choose=choose_plan)
