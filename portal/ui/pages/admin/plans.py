"""Admin plan management."""

from decimal import Decimal

from nicegui import ui
from pydantic import ValidationError

from portal.core.config import settings
from portal.schemas.account import UserInfo
from portal.schemas.billing import Plan, PlanIn
from portal.ui.auth.context import require_staff
from portal.ui.components.badge import status_badge
from portal.ui.components.data_table import Column, data_table, text_column
from portal.ui.components.dialogs import confirm
from portal.ui.components.formatting import format_amount
from portal.ui.components.layout import frame
from portal.ui.pages.common import fetch, run_action
from portal.ui.services.plans import (
    delete_plan_service,
    list_plans_service,
    save_plan_service,
)


async def edit_plan_dialog(plan: Plan | None = None) -> PlanIn | None:
    """Plan editor; returns the edited fields, or None when cancelled."""
    initial = plan.to_input() if plan is not None else PlanIn.blank()
    selected_modules = set(initial.allowed_modules)

    with ui.dialog() as dialog, ui.card().classes("w-[32rem]"):
        ui.label("Edit plan" if plan else "New plan").classes("text-lg font-bold")
        name_input = ui.input("Name", value=initial.name).classes("w-full")
        with ui.row().classes("w-full gap-2"):
            price_input = ui.number(
                f"Price ({settings.CURRENCY_SYMBOL})",
                value=float(initial.price),
                min=0,
                step=0.01,
                format="%.2f",
            ).classes("grow")
            users_input = ui.number("Users", value=initial.max_users, min=1)
        with ui.row().classes("w-full gap-2"):
            storage_input = ui.number(
                "Storage (GB)", value=initial.storage_limit_gb, min=0
            )
            instances_input = ui.number(
                "Instances", value=initial.max_instances, min=0
            )
        active_switch = ui.switch("Offered to customers", value=initial.is_active)

        ui.label("Modules").classes("font-medium mt-2")
        with ui.row().classes("gap-1"):
            for module in settings.AVAILABLE_MODULES:
                ui.checkbox(
                    module,
                    value=module in selected_modules,
                    on_change=lambda e, m=module: (
                        selected_modules.add(m)
                        if e.value
                        else selected_modules.discard(m)
                    ),
                )

        error_label = ui.label("").classes("text-red-500 text-sm")
        error_label.set_visibility(False)

        def submit() -> None:
            try:
                result = PlanIn(
                    name=(name_input.value or "").strip(),
                    price=Decimal(str(price_input.value or 0)),
                    max_users=int(users_input.value or 1),
                    storage_limit_gb=int(storage_input.value or 0),
                    max_instances=int(instances_input.value or 0),
                    allowed_modules=[
                        m for m in settings.AVAILABLE_MODULES if m in selected_modules
                    ],
                    is_active=active_switch.value,
                )
            except ValidationError:
                error_label.text = "Please check the plan fields"
                error_label.set_visibility(True)
                return
            dialog.submit(result)

        with ui.row().classes("w-full justify-end gap-2 mt-2"):
            ui.button("Cancel", on_click=lambda: dialog.submit(None)).props("flat")
            ui.button("Save", on_click=submit)

    result = await dialog
    dialog.delete()
    return result


@ui.page("/admin/plans")
@require_staff
async def admin_plans_page(user: UserInfo) -> None:
    plans: list[Plan] = []

    async def handle_save(plan: Plan | None = None) -> None:
        nonlocal plans
        edited = await edit_plan_dialog(plan)
        if edited is None:
            return
        plan_id = plan.id if plan is not None else None
        updated = await run_action(
            lambda client: save_plan_service(edited, client, plan_id),
            error_title="Unable to save the plan",
        )
        if updated is None:
            return
        plans = updated
        plan_table.refresh()
        ui.notify("Plan saved", color="positive")

    async def handle_delete(plan: Plan) -> None:
        nonlocal plans
        if not await confirm(
            f"Delete the plan {plan.name}?",
            title="Delete plan",
            confirm_label="Delete",
            destructive=True,
        ):
            return
        updated = await run_action(
            lambda client: delete_plan_service(plan.id, client),
            error_title="Unable to delete the plan",
        )
        if updated is None:
            return
        plans = updated
        plan_table.refresh()
        ui.notify("Plan deleted", color="positive")

    def actions_cell(plan: Plan) -> None:
        with ui.row().classes("gap-1 justify-end"):
            ui.button(icon="edit", on_click=lambda: handle_save(plan)).props(
                "flat round dense"
            )
            ui.button(icon="delete", on_click=lambda: handle_delete(plan)).props(
                "flat round dense color=negative"
            )

    columns: list[Column[Plan]] = [
        text_column("Name", lambda p: p.name),
        text_column("Price", lambda p: format_amount(p.price)),
        text_column("Users", lambda p: p.max_users),
        text_column("Storage", lambda p: f"{p.storage_limit_gb} GB"),
        text_column("Instances", lambda p: p.max_instances),
        text_column("Modules", lambda p: len(p.allowed_modules)),
        Column(
            "Status",
            lambda p: status_badge(
                "Active" if p.is_active else "Inactive",
                "success" if p.is_active else "neutral",
            ),
        ),
        Column("", actions_cell, align="right"),
    ]

    @ui.refreshable
    def plan_table() -> None:
        data_table(columns, plans, "No plan yet")

    with frame(user, "Plans"):
        with ui.row().classes("w-full justify-end"):
            ui.button("New plan", icon="add", on_click=lambda: handle_save())
        with ui.card().classes("w-full"):
            plan_table()

    plans = await fetch(list_plans_service, "plans") or []
    plan_table.refresh()
