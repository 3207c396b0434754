"""HTTP client for the provisioning API and the persisted session it reads."""

from portal.client.http import AUTH_ROUTE_MARKERS, ApiClient, is_auth_route
from portal.client.session import SessionStore

__all__ = ["AUTH_ROUTE_MARKERS", "ApiClient", "SessionStore", "is_auth_route"]
