"""Aggregated figures shown on overview pages."""

from typing import Annotated

from pydantic import BaseModel, Field

from portal.schemas.instance import Instance


class InstanceStats(BaseModel):
    """Instance counters by status group."""

    total: Annotated[int, Field(description="All instances", ge=0)] = 0
    running: Annotated[int, Field(description="RUNNING instances", ge=0)] = 0
    pending: Annotated[
        int, Field(description="CREATED/PROGRESS/DEPLOYING instances", ge=0)
    ] = 0
    errors: Annotated[int, Field(description="ERROR instances", ge=0)] = 0


class AdminOverview(BaseModel):
    """Key figures of the admin dashboard."""

    total_clients: Annotated[int, Field(description="Registered clients", ge=0)] = 0
    total_instances: Annotated[int, Field(description="All instances", ge=0)] = 0
    active_plans: Annotated[int, Field(description="Configured plans", ge=0)] = 0
    revenue: Annotated[float, Field(description="Forecast MRR", ge=0)] = 0.0
    instance_stats: Annotated[
        InstanceStats, Field(description="Instance counters")
    ] = InstanceStats()
    recent_instances: Annotated[
        list[Instance], Field(description="Most recent instances")
    ] = []
