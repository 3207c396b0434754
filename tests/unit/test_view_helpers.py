"""Tests for the pure helpers pages render from."""

from decimal import Decimal

import pytest

from portal.schemas import Instance, Payment, Plan, Subscription, UserInfo
from portal.ui.auth.login import access_token_from_fragment, google_authorize_url
from portal.ui.components.formatting import format_amount, format_date
from portal.ui.pages.payment import parse_amount
from portal.ui.services.accounts import landing_path
from portal.ui.services.dashboard import build_admin_overview
from portal.ui.services.instances import (
    build_instance_request,
    filter_instances,
    summarize_instances,
)
from portal.ui.services.payments import split_payments
from portal.ui.services.plans import active_plans
from portal.ui.services.subscriptions import (
    default_payment_amount,
    find_pending_subscription,
    select_current_subscription,
)
from tests.conftest import (
    instance_payload,
    payment_payload,
    plan_payload,
    subscription_payload,
)


def make_instances(*statuses: str) -> list[Instance]:
    return [
        Instance.model_validate(instance_payload(i, status=status))
        for i, status in enumerate(statuses, start=1)
    ]


def make_subscriptions(*statuses: str) -> list[Subscription]:
    return [
        Subscription.model_validate(subscription_payload(i, status=status))
        for i, status in enumerate(statuses, start=1)
    ]


class TestInstanceHelpers:
    """Tests for instance counters, search and deployment requests."""

    def test_summarize(self) -> None:
        """Test counters by status group."""
        stats = summarize_instances(
            make_instances("RUNNING", "RUNNING", "DEPLOYING", "CREATED", "ERROR", "STOPPED")
        )
        assert (stats.total, stats.running, stats.pending, stats.errors) == (6, 2, 2, 1)

    def test_filter_matches_name_client_and_database(self) -> None:
        """Test the search is case-insensitive across three fields."""
        instances = [
            Instance.model_validate(instance_payload(1, name="alpha")),
            Instance.model_validate(instance_payload(2, client_company="Globex")),
            Instance.model_validate(instance_payload(3, db_name="db_special")),
        ]
        assert [i.id for i in filter_instances(instances, "ALPHA")] == [1]
        assert [i.id for i in filter_instances(instances, "globex")] == [2]
        assert [i.id for i in filter_instances(instances, "special")] == [3]
        assert len(filter_instances(instances, "  ")) == 3

    def test_build_request_appends_suffix(self) -> None:
        """Test the domain is the name plus the configured suffix."""
        request = build_instance_request("  acme ", ".saas.test")
        assert (request.name, request.domain) == ("acme", "acme.saas.test")

    def test_build_request_rejects_empty_name(self) -> None:
        """Test an empty workspace name never reaches the API."""
        with pytest.raises(ValueError, match="required"):
            build_instance_request("   ")


class TestSubscriptionHelpers:
    """Tests for current subscription selection and payment defaults."""

    def test_active_wins(self) -> None:
        """Test an ACTIVE subscription is preferred."""
        current = select_current_subscription(
            make_subscriptions("EXPIRED", "PENDING", "ACTIVE")
        )
        assert current is not None and current.status == "ACTIVE"

    def test_pending_before_others(self) -> None:
        """Test PENDING is used when nothing is active."""
        current = select_current_subscription(make_subscriptions("EXPIRED", "PENDING"))
        assert current is not None and current.status == "PENDING"

    def test_first_as_last_resort(self) -> None:
        """Test the first subscription is used otherwise."""
        current = select_current_subscription(
            make_subscriptions("EXPIRED", "SUSPENDED")
        )
        assert current is not None and current.id == 1
        assert select_current_subscription([]) is None

    def test_find_pending(self) -> None:
        """Test the first PENDING subscription is found."""
        pending = find_pending_subscription(make_subscriptions("ACTIVE", "PENDING"))
        assert pending is not None and pending.id == 2

    def test_default_amount_uses_amount_due(self) -> None:
        """Test a positive amount due is pre-filled."""
        subscription = Subscription.model_validate(
            subscription_payload(amount_due="20.00", plan_price="49.00")
        )
        assert default_payment_amount(subscription) == Decimal("20.00")

    def test_default_amount_falls_back_to_plan_price(self) -> None:
        """Test the plan price is pre-filled when nothing is due."""
        subscription = Subscription.model_validate(
            subscription_payload(amount_due="0.00", plan_price="49.00")
        )
        assert default_payment_amount(subscription) == Decimal("49.00")


class TestBillingHelpers:
    """Tests for payment and plan helpers."""

    def test_split_payments(self) -> None:
        """Test pending payments are separated from the history."""
        payments = [
            Payment.model_validate(payment_payload(1, status="PENDING")),
            Payment.model_validate(payment_payload(2, status="PAID")),
            Payment.model_validate(payment_payload(3, status="FAILED")),
        ]
        pending, history = split_payments(payments)
        assert [p.id for p in pending] == [1]
        assert [p.id for p in history] == [2, 3]

    def test_active_plans(self) -> None:
        """Test inactive plans are not offered."""
        plans = [
            Plan.model_validate(plan_payload(1)),
            Plan.model_validate(plan_payload(2, is_active=False)),
        ]
        assert [p.id for p in active_plans(plans)] == [1]

    def test_parse_amount(self) -> None:
        """Test form amounts are parsed leniently."""
        assert parse_amount(49.5) == Decimal("49.5")
        assert parse_amount(None) == Decimal(0)
        assert parse_amount("abc") == Decimal(0)


class TestAdminOverview:
    """Tests for the admin KPI aggregation."""

    def test_overview(self) -> None:
        """Test counts, revenue forecast and recent instances."""
        instances = make_instances("RUNNING", "ERROR", "DEPLOYING")
        plans = [Plan.model_validate(plan_payload(1))]

        overview = build_admin_overview(
            instances, [], plans, recent_limit=2, revenue_per_instance=49.0
        )

        assert overview.total_instances == 3
        assert overview.total_clients == 0
        assert overview.active_plans == 1
        assert overview.revenue == pytest.approx(147.0)
        assert [i.id for i in overview.recent_instances] == [1, 2]
        assert overview.instance_stats.errors == 1


class TestNavigationHelpers:
    """Tests for post-login routing and the federated login URLs."""

    def test_landing_path(self) -> None:
        """Test staff land on the admin overview, clients on their dashboard."""
        assert landing_path(UserInfo(id=1, username="a", is_staff=True)) == (
            "/admin/dashboard"
        )
        assert landing_path(UserInfo(id=2, username="b")) == "/dashboard"

    def test_google_authorize_url(self) -> None:
        """Test the implicit flow asks for a token."""
        url = google_authorize_url("client-123", "http://portal.test/auth/google/callback")
        assert url.startswith("https://accounts.google.com/o/oauth2/v2/auth?")
        assert "response_type=token" in url
        assert "client_id=client-123" in url

    def test_access_token_from_fragment(self) -> None:
        """Test the token is read from the callback URL fragment."""
        fragment = "#access_token=ya29.abc&token_type=Bearer&expires_in=3599"
        assert access_token_from_fragment(fragment) == "ya29.abc"
        assert access_token_from_fragment("#error=access_denied") is None


class TestFormatting:
    """Tests for amount and date formatting."""

    def test_format_amount(self) -> None:
        """Test amounts carry two decimals and the currency symbol."""
        assert format_amount(Decimal("49")) == "49.00 €"
        assert format_amount(None) == "0.00 €"

    def test_format_date(self) -> None:
        """Test missing dates show a dash."""
        assert format_date(None) == "-"
