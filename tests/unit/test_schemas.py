"""Tests for API record schemas."""

from decimal import Decimal

from portal.schemas import (
    BillingCycle,
    ClientProfile,
    Instance,
    Payment,
    Plan,
    PlanIn,
    Subscription,
    SubscriptionIn,
    SubscriptionStatus,
    TokenPair,
    UserInfo,
)
from tests.conftest import (
    client_payload,
    instance_payload,
    payment_payload,
    plan_payload,
    subscription_payload,
)


class TestAccountSchemas:
    """Tests for user and token schemas."""

    def test_token_pair_from_token_endpoint(self) -> None:
        """Test the ``access``/``refresh`` spelling."""
        tokens = TokenPair.model_validate({"access": "a1", "refresh": "r1"})
        assert (tokens.access, tokens.refresh) == ("a1", "r1")

    def test_token_pair_from_federated_login(self) -> None:
        """Test the ``access_token``/``refresh_token`` spelling."""
        tokens = TokenPair.model_validate(
            {"access_token": "a2", "refresh_token": "r2", "user": {}}
        )
        assert (tokens.access, tokens.refresh) == ("a2", "r2")

    def test_user_defaults_to_client_role(self) -> None:
        """Test missing role fields default to a non-staff client."""
        user = UserInfo.model_validate({"id": 1, "username": "jane"})
        assert user.role == "client"
        assert user.is_staff is False
        assert user.initial == "J"

    def test_client_profile_nested_records(self) -> None:
        """Test nested user and subscription summary."""
        profile = ClientProfile.model_validate(client_payload())
        assert profile.user.username == "acme"
        assert profile.active_subscription is not None
        assert profile.active_subscription.plan_name == "Starter"


class TestInstanceSchema:
    """Tests for the Instance schema."""

    def test_version_alias(self) -> None:
        """Test ``odoo_version`` is read into ``version``."""
        assert Instance.model_validate(instance_payload()).version == "17.0"

    def test_status_label_prefers_display(self) -> None:
        """Test the human readable status is shown when present."""
        instance = Instance.model_validate(instance_payload(status_display=None))
        assert instance.status_label == "RUNNING"

    def test_optional_strings_accept_null(self) -> None:
        """Test records without database, company or plan still load."""
        instance = Instance.model_validate(
            {
                "id": 1,
                "name": "acme",
                "domain": None,
                "db_name": None,
                "client_company": None,
                "subscription_plan": None,
            }
        )
        assert instance.db_name is None
        assert instance.client_company is None

    def test_pending_and_variant(self) -> None:
        """Test derived presentation properties."""
        instance = Instance.model_validate(instance_payload(status="DEPLOYING"))
        assert instance.is_pending is True
        assert instance.variant == "warning"


class TestBillingSchemas:
    """Tests for plan, subscription and payment schemas."""

    def test_plan_to_input(self) -> None:
        """Test editing a plan keeps everything but id and creation time."""
        plan = Plan.model_validate(plan_payload(price="49.000"))
        editable = plan.to_input()
        assert editable.price == Decimal("49")
        assert editable.allowed_modules == ["crm", "sale"]
        assert not hasattr(editable, "id")

    def test_blank_plan_defaults(self) -> None:
        """Test the new-plan editor opens with default limits."""
        blank = PlanIn.blank()
        assert blank.name == ""
        assert blank.price == Decimal("0.00")
        assert (blank.max_users, blank.storage_limit_gb, blank.max_instances) == (
            1,
            10,
            1,
        )
        assert blank.allowed_modules == []
        assert blank.is_active is True

    def test_payment_without_company_or_plan(self) -> None:
        """Test payments with null company and plan names load."""
        payment = Payment.model_validate(
            payment_payload(client_company=None, subscription_plan=None)
        )
        assert payment.client_company is None

    def test_subscription_amount_due(self) -> None:
        """Test amount due detection."""
        due = Subscription.model_validate(subscription_payload(amount_due="12.50"))
        settled = Subscription.model_validate(subscription_payload())
        assert due.has_amount_due is True
        assert settled.has_amount_due is False

    def test_subscription_input_from_record(self) -> None:
        """Test an existing subscription becomes an admin edit form."""
        subscription = Subscription.model_validate(
            subscription_payload(status="SUSPENDED", billing_cycle="YEARLY")
        )
        form = SubscriptionIn.from_subscription(subscription)
        assert form.status is SubscriptionStatus.SUSPENDED
        assert form.billing_cycle is BillingCycle.YEARLY
        assert form.client == 3

    def test_subscription_input_unknown_values(self) -> None:
        """Test unknown status and cycle fall back to defaults."""
        subscription = Subscription.model_validate(
            subscription_payload(status="CANCELLED", billing_cycle="WEEKLY")
        )
        form = SubscriptionIn.from_subscription(subscription)
        assert form.status is SubscriptionStatus.ACTIVE
        assert form.billing_cycle is BillingCycle.MONTHLY

    def test_payment_method_label(self) -> None:
        """Test manual payments get a readable label."""
        assert Payment.model_validate(payment_payload()).method_label == (
            "Manual payment"
        )
        assert (
            Payment.model_validate(payment_payload(method="STRIPE")).method_label
            == "STRIPE"
        )
