"""Instance listing, deployment and lifecycle action services."""

from loguru import logger

from portal.client.http import ApiClient
from portal.core.config import settings
from portal.core.instance_lifecycle import InstanceAction, InstanceStatus
from portal.schemas.dashboard import InstanceStats
from portal.schemas.instance import Instance, InstanceCreate


async def list_instances_service(client: ApiClient) -> list[Instance]:
    data = await client.get("/instances/")
    return [Instance.model_validate(item) for item in data or []]


def build_instance_request(
    name: str, domain_suffix: str | None = None
) -> InstanceCreate:
    """Turn a workspace name into a deployment request.

    Raises:
        ValueError: The name is empty
    """
    name = name.strip()
    if not name:
        raise ValueError("Workspace name is required")
    suffix = settings.INSTANCE_DOMAIN_SUFFIX if domain_suffix is None else domain_suffix
    return InstanceCreate(name=name, domain=f"{name}{suffix}")


async def create_instance_service(
    name: str,
    client: ApiClient,
    domain_suffix: str | None = None,
) -> list[Instance]:
    """Deploy a new instance and return the refreshed instance list."""
    request = build_instance_request(name, domain_suffix)
    await client.post(
        "/instances/",
        json=request.model_dump(),
        error_message="Instance creation failed",
    )
    logger.bind(name=request.name, domain=request.domain).info("Instance requested")
    return await list_instances_service(client)


async def perform_instance_action_service(
    instance_id: int,
    action: InstanceAction,
    client: ApiClient,
) -> list[Instance]:
    """Send a lifecycle action, then re-fetch the whole instance list.

    The API answers once the action has been accepted; the portal never
    updates a row optimistically.
    """
    await client.post(
        f"/instances/{instance_id}/{action.endpoint}/",
        error_message="Action failed",
    )
    logger.bind(instance_id=instance_id, action=action.value).info(
        "Instance action sent"
    )
    return await list_instances_service(client)


def summarize_instances(instances: list[Instance]) -> InstanceStats:
    """Counters shown above instance lists."""
    return InstanceStats(
        total=len(instances),
        running=sum(1 for i in instances if i.status == InstanceStatus.RUNNING.value),
        pending=sum(1 for i in instances if i.is_pending),
        errors=sum(1 for i in instances if i.status == InstanceStatus.ERROR.value),
    )


def filter_instances(instances: list[Instance], term: str) -> list[Instance]:
    """Case-insensitive match on instance name, client company or database."""
    needle = term.strip().lower()
    if not needle:
        return list(instances)
    return [
        instance
        for instance in instances
        if any(
            needle in (value or "").lower()
            for value in (instance.name, instance.client_company, instance.db_name)
        )
    ]
