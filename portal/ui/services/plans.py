"""Billing plan services."""

from loguru import logger

from portal.client.http import ApiClient
from portal.schemas.billing import Plan, PlanIn


async def list_plans_service(client: ApiClient) -> list[Plan]:
    data = await client.get("/plans/")
    return [Plan.model_validate(item) for item in data or []]


def active_plans(plans: list[Plan]) -> list[Plan]:
    """Plans offered to customers."""
    return [plan for plan in plans if plan.is_active]


async def save_plan_service(
    plan: PlanIn,
    client: ApiClient,
    plan_id: int | None = None,
) -> list[Plan]:
    """Create a plan, or update it when ``plan_id`` is given, then re-fetch."""
    payload = plan.model_dump(mode="json")
    if plan_id is None:
        await client.post(
            "/plans/", json=payload, error_message="Unable to save the plan"
        )
        logger.bind(name=plan.name).info("Plan created")
    else:
        await client.put(
            f"/plans/{plan_id}/", json=payload, error_message="Unable to save the plan"
        )
        logger.bind(plan_id=plan_id).info("Plan updated")
    return await list_plans_service(client)


async def delete_plan_service(plan_id: int, client: ApiClient) -> list[Plan]:
    await client.delete(f"/plans/{plan_id}/", error_message="Unable to delete the plan")
    logger.bind(plan_id=plan_id).info("Plan deleted")
    return await list_plans_service(client)
