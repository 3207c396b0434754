"""Instance statuses and the lifecycle actions the portal can request.

The provisioning API owns the lifecycle; the portal never validates a
transition. This module only answers presentation questions: which endpoint an
action posts to, which action a status row offers, and how a status is coloured.

Lifecycle as driven by the API:

```mermaid
stateDiagram-v2
    [*] --> CREATED
    CREATED --> DEPLOYING: provision
    DEPLOYING --> RUNNING: deployed
    DEPLOYING --> ERROR: failed
    RUNNING --> STOPPED: stop
    STOPPED --> RUNNING: start
    ERROR --> RUNNING: start
    RUNNING --> RUNNING: restart
    RUNNING --> [*]: delete
    STOPPED --> [*]: delete
    ERROR --> [*]: delete
```
"""

from enum import Enum
from typing import ClassVar


class InstanceStatus(str, Enum):
    """Status values reported by the API for an instance."""

    CREATED = "CREATED"
    PROGRESS = "PROGRESS"
    DEPLOYING = "DEPLOYING"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    ERROR = "ERROR"


class InstanceAction(str, Enum):
    """User actions that can be sent to an instance."""

    START = "START"
    STOP = "STOP"
    RESTART = "RESTART"
    DELETE = "DELETE"

    @property
    def endpoint(self) -> str:
        """Path segment of the action under ``/instances/{id}/``."""
        return InstanceLifecycle.ENDPOINTS[self]

    @property
    def label(self) -> str:
        """Button label for the action."""
        return self.value.capitalize()


class InstanceLifecycle:
    """Presentation rules for instance statuses and actions.

    Badge variants:
        - RUNNING → success
        - STOPPED → neutral
        - ERROR → error
        - DEPLOYING → warning
        - anything else → info
    """

    ENDPOINTS: ClassVar[dict[InstanceAction, str]] = {
        InstanceAction.START: "start",
        InstanceAction.STOP: "stop",
        InstanceAction.RESTART: "restart",
        InstanceAction.DELETE: "remove",
    }

    VARIANTS: ClassVar[dict[str, str]] = {
        InstanceStatus.RUNNING.value: "success",
        InstanceStatus.STOPPED.value: "neutral",
        InstanceStatus.ERROR.value: "error",
        InstanceStatus.DEPLOYING.value: "warning",
    }

    PENDING_STATUSES: ClassVar[frozenset[str]] = frozenset(
        {
            InstanceStatus.CREATED.value,
            InstanceStatus.PROGRESS.value,
            InstanceStatus.DEPLOYING.value,
        }
    )

    STARTABLE_STATUSES: ClassVar[frozenset[str]] = frozenset(
        {InstanceStatus.STOPPED.value, InstanceStatus.ERROR.value}
    )

    # Actions offered by the admin action menu, in display order
    ADMIN_ACTIONS: ClassVar[tuple[InstanceAction, ...]] = (
        InstanceAction.START,
        InstanceAction.STOP,
        InstanceAction.RESTART,
        InstanceAction.DELETE,
    )

    @classmethod
    def variant(cls, status: str) -> str:
        """Badge variant for a status."""
        return cls.VARIANTS.get(status, "info")

    @classmethod
    def is_pending(cls, status: str) -> bool:
        """Whether the instance is still being provisioned."""
        return status in cls.PENDING_STATUSES

    @classmethod
    def toggle_action(cls, status: str) -> InstanceAction:
        """The start/stop action a customer row offers for a status."""
        if status in cls.STARTABLE_STATUSES:
            return InstanceAction.START
        return InstanceAction.STOP

    @classmethod
    def row_actions(cls, status: str) -> list[InstanceAction]:
        """Actions offered on a customer instance row."""
        return [cls.toggle_action(status), InstanceAction.RESTART]

    @classmethod
    def confirmation_message(cls, action: InstanceAction) -> str:
        """Text of the confirmation dialog shown before an admin action."""
        if action is InstanceAction.DELETE:
            return (
                "Are you sure you want to delete this instance? "
                "This action cannot be undone."
            )
        return f"Do you really want to {action.value.lower()} this instance?"
