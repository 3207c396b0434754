"""Tests for instance status presentation and action mapping."""

import pytest

from portal.core.instance_lifecycle import (
    InstanceAction,
    InstanceLifecycle,
    InstanceStatus,
)


class TestInstanceAction:
    """Tests for action endpoints and labels."""

    @pytest.mark.parametrize(
        ("action", "endpoint"),
        [
            (InstanceAction.START, "start"),
            (InstanceAction.STOP, "stop"),
            (InstanceAction.RESTART, "restart"),
            (InstanceAction.DELETE, "remove"),
        ],
    )
    def test_endpoint(self, action: InstanceAction, endpoint: str) -> None:
        """Test each action posts to its endpoint; DELETE uses ``remove``."""
        assert action.endpoint == endpoint

    def test_label(self) -> None:
        """Test button labels are capitalized."""
        assert InstanceAction.RESTART.label == "Restart"


class TestInstanceLifecycle:
    """Tests for InstanceLifecycle presentation rules."""

    @pytest.mark.parametrize(
        ("status", "variant"),
        [
            ("RUNNING", "success"),
            ("STOPPED", "neutral"),
            ("ERROR", "error"),
            ("DEPLOYING", "warning"),
            ("CREATED", "info"),
            ("SOMETHING_NEW", "info"),
        ],
    )
    def test_variant(self, status: str, variant: str) -> None:
        """Test status badge variants."""
        assert InstanceLifecycle.variant(status) == variant

    def test_pending_statuses(self) -> None:
        """Test provisioning statuses count as pending."""
        for status in (
            InstanceStatus.CREATED,
            InstanceStatus.PROGRESS,
            InstanceStatus.DEPLOYING,
        ):
            assert InstanceLifecycle.is_pending(status.value) is True
        assert InstanceLifecycle.is_pending(InstanceStatus.RUNNING.value) is False

    def test_toggle_offers_start_when_stopped_or_failed(self) -> None:
        """Test STOPPED and ERROR instances can be started."""
        assert InstanceLifecycle.toggle_action("STOPPED") is InstanceAction.START
        assert InstanceLifecycle.toggle_action("ERROR") is InstanceAction.START

    def test_toggle_offers_stop_otherwise(self) -> None:
        """Test running instances offer STOP."""
        assert InstanceLifecycle.toggle_action("RUNNING") is InstanceAction.STOP

    def test_row_actions_always_include_restart(self) -> None:
        """Test customer rows offer the toggle then RESTART."""
        assert InstanceLifecycle.row_actions("STOPPED") == [
            InstanceAction.START,
            InstanceAction.RESTART,
        ]

    def test_admin_actions(self) -> None:
        """Test the admin menu offers every action."""
        assert set(InstanceLifecycle.ADMIN_ACTIONS) == set(InstanceAction)

    def test_delete_confirmation_warns(self) -> None:
        """Test deletion is flagged as irreversible."""
        message = InstanceLifecycle.confirmation_message(InstanceAction.DELETE)
        assert "cannot be undone" in message
        assert "stop" in InstanceLifecycle.confirmation_message(InstanceAction.STOP)
