"""Admin overview aggregation."""

import asyncio

from portal.client.http import ApiClient
from portal.core.config import settings
from portal.schemas.account import ClientProfile
from portal.schemas.billing import Plan
from portal.schemas.dashboard import AdminOverview
from portal.schemas.instance import Instance
from portal.ui.services.accounts import list_clients_service
from portal.ui.services.instances import list_instances_service, summarize_instances
from portal.ui.services.plans import list_plans_service


def build_admin_overview(
    instances: list[Instance],
    clients: list[ClientProfile],
    plans: list[Plan],
    recent_limit: int | None = None,
    revenue_per_instance: float | None = None,
) -> AdminOverview:
    """Compute the admin KPIs.

    Revenue is a forecast: every instance is assumed to bring in
    ``revenue_per_instance`` per month.
    """
    limit = settings.ADMIN_RECENT_INSTANCES if recent_limit is None else recent_limit
    per_instance = (
        settings.ESTIMATED_REVENUE_PER_INSTANCE
        if revenue_per_instance is None
        else revenue_per_instance
    )
    return AdminOverview(
        total_clients=len(clients),
        total_instances=len(instances),
        active_plans=len(plans),
        revenue=len(instances) * per_instance,
        instance_stats=summarize_instances(instances),
        recent_instances=instances[:limit],
    )


async def load_admin_overview_service(client: ApiClient) -> AdminOverview:
    """Fetch instances, clients and plans concurrently and aggregate them."""
    instances, clients, plans = await asyncio.gather(
        list_instances_service(client),
        list_clients_service(client),
        list_plans_service(client),
    )
    return build_admin_overview(instances, clients, plans)
