"""Plan card shown on the customer dashboard and plans page."""

from collections.abc import Awaitable, Callable

from nicegui import ui

from portal.schemas.billing import Plan
from portal.ui.components.formatting import format_amount

# Modules listed before collapsing the rest into "+N"
VISIBLE_MODULES = 6


def plan_card(
    plan: Plan,
    on_choose: Callable[[Plan], Awaitable[None]] | None = None,
    action_label: str = "Choose this plan",
    highlighted: bool = False,
) -> None:
    card = ui.card().classes("w-72")
    if highlighted:
        card.classes("border-2 border-primary")
    with card:
        ui.label(plan.name).classes("text-lg font-bold")
        with ui.row().classes("items-baseline gap-1"):
            ui.label(format_amount(plan.price)).classes("text-2xl font-bold")
            ui.label("/ month").classes("text-gray-500")
        with ui.column().classes("gap-0 text-sm"):
            ui.label(f"{plan.max_users} users")
            ui.label(f"{plan.storage_limit_gb} GB storage")
            ui.label(f"{plan.max_instances} instances")
        if plan.allowed_modules:
            with ui.row().classes("gap-1"):
                for module in plan.allowed_modules[:VISIBLE_MODULES]:
                    ui.chip(module).props("dense outline")
                hidden = len(plan.allowed_modules) - VISIBLE_MODULES
                if hidden > 0:
                    ui.chip(f"+{hidden}").props("dense")
        if on_choose is not None:
            ui.button(
                action_label, on_click=lambda: on_choose(plan)
            ).classes("w-full mt-2")
