"""Hosted instance schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, Field

from portal.core.instance_lifecycle import InstanceLifecycle


class Instance(BaseModel):
    """A hosted application environment."""

    id: Annotated[int, Field(description="Instance ID")]
    name: Annotated[str, Field(description="Workspace name")]
    domain: Annotated[str | None, Field(description="Public domain")] = None
    port: Annotated[int | None, Field(description="Published port")] = None
    status: Annotated[str, Field(description="Lifecycle status code")] = "CREATED"
    status_display: Annotated[
        str | None, Field(description="Human readable status")
    ] = None
    created_at: Annotated[datetime | None, Field(description="Creation time")] = None
    admin_password: Annotated[
        str | None, Field(description="Initial administrator password")
    ] = None
    version: Annotated[
        str | None,
        Field(
            description="Application version",
            validation_alias=AliasChoices("version", "odoo_version"),
        ),
    ] = None
    db_name: Annotated[str | None, Field(description="Database name")] = None
    client_company: Annotated[str | None, Field(description="Owning company")] = None
    subscription_plan: Annotated[str | None, Field(description="Plan name")] = None

    @property
    def status_label(self) -> str:
        """Status text shown in badges."""
        return self.status_display or self.status

    @property
    def variant(self) -> str:
        """Badge variant for the current status."""
        return InstanceLifecycle.variant(self.status)

    @property
    def is_pending(self) -> bool:
        """Whether the instance is still being provisioned."""
        return InstanceLifecycle.is_pending(self.status)


class InstanceCreate(BaseModel):
    """Payload creating a new instance."""

    name: Annotated[str, Field(min_length=1, description="Workspace name")]
    domain: Annotated[str, Field(min_length=1, description="Public domain")]
