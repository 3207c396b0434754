"""Shared fixtures: a scripted fake of the provisioning API."""

from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import Mock

import httpx
import pytest
import pytest_asyncio

from portal.client.http import ApiClient
from portal.client.session import SessionStore

API_BASE_URL = "http://api.test/api"


class FakeApi:
    """Answers requests from canned responses and records them.

    Responses are queued per ``(method, path)``; the last queued response keeps
    being served once the queue is down to one entry. Paths are relative to
    the API root.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[tuple[int, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self, method: str, path: str, json: Any = None, status_code: int = 200
    ) -> None:
        self.routes.setdefault((method, path), []).append((status_code, json))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        queue = self.routes.get((request.method, path))
        if not queue:
            return httpx.Response(404, json={"detail": "Not found."})
        status_code, body = queue.pop(0) if len(queue) > 1 else queue[0]
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    def calls(self, method: str | None = None) -> list[tuple[str, str]]:
        """(method, path) of recorded requests, optionally for one method."""
        return [
            (r.method, r.url.path.removeprefix("/api"))
            for r in self.requests
            if method is None or r.method == method
        ]


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def storage() -> dict[str, Any]:
    """Stand-in for NiceGUI's per-browser ``app.storage.user``."""
    return {}


@pytest.fixture
def session(storage: dict[str, Any]) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def on_unauthorized() -> Mock:
    return Mock()


@pytest_asyncio.fixture
async def api_client(
    session: SessionStore, fake_api: FakeApi, on_unauthorized: Mock
) -> AsyncIterator[ApiClient]:
    async with ApiClient(
        session,
        base_url=API_BASE_URL,
        on_unauthorized=on_unauthorized,
        transport=httpx.MockTransport(fake_api.handler),
    ) as client:
        yield client


def instance_payload(instance_id: int = 1, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": instance_id,
        "name": f"acme-{instance_id}",
        "domain": f"acme-{instance_id}.localhost",
        "port": 8069 + instance_id,
        "status": "RUNNING",
        "status_display": "Running",
        "created_at": "2026-01-15T10:30:00Z",
        "odoo_version": "17.0",
        "db_name": f"db_acme_{instance_id}",
        "client_company": "Acme",
        "subscription_plan": "Starter",
    }
    payload.update(overrides)
    return payload


def payment_payload(payment_id: int = 1, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": payment_id,
        "subscription": 10,
        "amount": "49.00",
        "payment_date": "2026-02-01T09:00:00Z",
        "method": "MANUAL",
        "status": "PENDING",
        "transaction_id": None,
        "subscription_plan": "Starter",
        "client_company": "Acme",
    }
    payload.update(overrides)
    return payload


def subscription_payload(subscription_id: int = 10, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": subscription_id,
        "client": 3,
        "plan": 1,
        "start_date": "2026-01-01",
        "end_date": "2026-12-31",
        "status": "ACTIVE",
        "auto_renew": True,
        "billing_cycle": "MONTHLY",
        "next_billing_date": "2026-02-01",
        "client_company": "Acme",
        "plan_name": "Starter",
        "plan_price": "49.00",
        "is_active_status": True,
        "total_paid": "0.00",
        "amount_due": "0.00",
        "plan_allowed_modules": ["crm", "sale"],
    }
    payload.update(overrides)
    return payload


def plan_payload(plan_id: int = 1, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": plan_id,
        "name": "Starter",
        "price": "49.00",
        "max_users": 5,
        "storage_limit_gb": 20,
        "max_instances": 1,
        "allowed_modules": ["crm", "sale"],
        "is_active": True,
        "created_at": "2026-01-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


def client_payload(client_id: int = 3, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": client_id,
        "company_name": "Acme",
        "phone": "+33 1 23 45 67 89",
        "address": None,
        "created_at": "2026-01-01T00:00:00Z",
        "user": {"id": 7, "username": "acme", "email": "it@acme.test"},
        "active_subscription": {"plan_name": "Starter", "status": "ACTIVE"},
    }
    payload.update(overrides)
    return payload
