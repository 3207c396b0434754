"""Tests for instance deployment and lifecycle actions against a fake API."""

import json

import pytest

from portal.client.http import ApiClient
from portal.core.exceptions import PortalApiError
from portal.core.instance_lifecycle import InstanceAction
from portal.ui.services.instances import (
    create_instance_service,
    list_instances_service,
    perform_instance_action_service,
)
from tests.conftest import FakeApi, instance_payload


class TestInstanceActions:
    """Tests for perform_instance_action_service."""

    @pytest.mark.asyncio
    async def test_action_refetches_and_reflects_status(
        self, api_client: ApiClient, fake_api: FakeApi
    ) -> None:
        """Test the list is re-fetched after an action and shows the new status."""
        fake_api.add("GET", "/instances/", [instance_payload(1, status="STOPPED")])
        fake_api.add("GET", "/instances/", [instance_payload(1, status="RUNNING")])
        fake_api.add("POST", "/instances/1/start/", {"status": "starting"})

        before = await list_instances_service(api_client)
        after = await perform_instance_action_service(
            1, InstanceAction.START, api_client
        )

        assert before[0].status == "STOPPED"
        assert after[0].status == "RUNNING"
        assert fake_api.calls() == [
            ("GET", "/instances/"),
            ("POST", "/instances/1/start/"),
            ("GET", "/instances/"),
        ]

    @pytest.mark.asyncio
    async def test_delete_posts_to_remove(
        self, api_client: ApiClient, fake_api: FakeApi
    ) -> None:
        """Test DELETE is sent as a POST to ``remove``."""
        fake_api.add("POST", "/instances/4/remove/", None, 204)
        fake_api.add("GET", "/instances/", [])

        remaining = await perform_instance_action_service(
            4, InstanceAction.DELETE, api_client
        )

        assert remaining == []
        assert ("POST", "/instances/4/remove/") in fake_api.calls()

    @pytest.mark.asyncio
    async def test_failed_action_does_not_refetch(
        self, api_client: ApiClient, fake_api: FakeApi
    ) -> None:
        """Test errors surface the server message and skip the re-fetch."""
        fake_api.add(
            "POST", "/instances/2/restart/", {"error": "Docker daemon unavailable"}, 500
        )

        with pytest.raises(PortalApiError, match="Docker daemon unavailable"):
            await perform_instance_action_service(
                2, InstanceAction.RESTART, api_client
            )

        assert fake_api.calls("GET") == []


class TestInstanceCreation:
    """Tests for create_instance_service."""

    @pytest.mark.asyncio
    async def test_create_sends_name_and_domain(
        self, api_client: ApiClient, fake_api: FakeApi
    ) -> None:
        """Test the deployment payload and the refreshed list."""
        fake_api.add("POST", "/instances/", instance_payload(9, status="CREATED"), 201)
        fake_api.add("GET", "/instances/", [instance_payload(9, status="CREATED")])

        instances = await create_instance_service(
            "acme", api_client, domain_suffix=".saas.test"
        )

        body = json.loads(fake_api.requests[0].content)
        assert body == {"name": "acme", "domain": "acme.saas.test"}
        assert instances[0].is_pending is True

    @pytest.mark.asyncio
    async def test_empty_name_sends_nothing(
        self, api_client: ApiClient, fake_api: FakeApi
    ) -> None:
        """Test form validation happens before any request."""
        with pytest.raises(ValueError):
            await create_instance_service(" ", api_client)

        assert fake_api.requests == []
