"""Plan, subscription and payment schemas."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field


def _coerce[E: Enum](enum_type: type[E], value: str, default: E) -> E:
    """Enum member for ``value``, or ``default`` for values the portal does not know."""
    try:
        return enum_type(value)
    except ValueError:
        return default


class SubscriptionStatus(str, Enum):
    """Status of a subscription."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    EXPIRED = "EXPIRED"


class BillingCycle(str, Enum):
    """Billing period of a subscription."""

    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class PaymentStatus(str, Enum):
    """Status of a payment."""

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class PlanIn(BaseModel):
    """Editable fields of a billing plan."""

    name: Annotated[str, Field(min_length=1, description="Plan name")]
    price: Annotated[
        Decimal, Field(ge=0, description="Monthly price")
    ] = Decimal("0.00")
    max_users: Annotated[int, Field(ge=1, description="User limit")] = 1
    storage_limit_gb: Annotated[int, Field(ge=0, description="Storage limit")] = 10
    max_instances: Annotated[int, Field(ge=0, description="Instance limit")] = 1
    allowed_modules: Annotated[
        list[str], Field(description="Modules included in the plan")
    ] = []
    is_active: Annotated[bool, Field(description="Offered to customers")] = True

    @classmethod
    def blank(cls) -> "PlanIn":
        """Unvalidated defaults seeding the editor of a new plan."""
        return cls.model_construct(name="")


class Plan(PlanIn):
    """A billing tier with usage limits."""

    id: Annotated[int, Field(description="Plan ID")]
    created_at: Annotated[datetime | None, Field(description="Creation time")] = None

    def to_input(self) -> PlanIn:
        """Editable copy of this plan."""
        return PlanIn.model_validate(self.model_dump(exclude={"id", "created_at"}))


class Subscription(BaseModel):
    """Binding between a client and a plan with billing-cycle metadata."""

    id: Annotated[int, Field(description="Subscription ID")]
    client: Annotated[int | None, Field(description="Client ID")] = None
    plan: Annotated[int | None, Field(description="Plan ID")] = None
    start_date: Annotated[date | None, Field(description="Start date")] = None
    end_date: Annotated[date | None, Field(description="End date")] = None
    status: Annotated[str, Field(description="Subscription status")] = (
        SubscriptionStatus.PENDING.value
    )
    auto_renew: Annotated[bool, Field(description="Renews automatically")] = True
    billing_cycle: Annotated[str, Field(description="Billing period")] = (
        BillingCycle.MONTHLY.value
    )
    next_billing_date: Annotated[
        date | None, Field(description="Next invoice date")
    ] = None
    client_company: Annotated[
        str | None, Field(description="Client company name")
    ] = None
    plan_name: Annotated[str, Field(description="Plan name")] = ""
    plan_price: Annotated[Decimal | None, Field(description="Plan price")] = None
    is_active_status: Annotated[bool, Field(description="Currently active")] = False
    total_paid: Annotated[Decimal | None, Field(description="Amount paid")] = None
    amount_due: Annotated[Decimal | None, Field(description="Outstanding amount")] = (
        None
    )
    plan_allowed_modules: Annotated[
        list[str], Field(description="Modules of the subscribed plan")
    ] = []

    @property
    def is_pending(self) -> bool:
        """Whether the subscription awaits its first payment."""
        return self.status == SubscriptionStatus.PENDING.value

    @property
    def has_amount_due(self) -> bool:
        """Whether an outstanding amount remains."""
        return (self.amount_due or Decimal(0)) > 0


class SubscriptionIn(BaseModel):
    """Subscription fields editable by an administrator."""

    client: Annotated[int, Field(description="Client ID")]
    plan: Annotated[int, Field(description="Plan ID")]
    end_date: Annotated[date | None, Field(description="End date")] = None
    status: Annotated[SubscriptionStatus, Field(description="Status")] = (
        SubscriptionStatus.ACTIVE
    )
    auto_renew: Annotated[bool, Field(description="Renews automatically")] = True
    billing_cycle: Annotated[BillingCycle, Field(description="Billing period")] = (
        BillingCycle.MONTHLY
    )

    @classmethod
    def from_subscription(cls, subscription: Subscription) -> "SubscriptionIn":
        """Editable copy of an existing subscription."""
        return cls(
            client=subscription.client or 0,
            plan=subscription.plan or 0,
            end_date=subscription.end_date,
            status=_coerce(
                SubscriptionStatus, subscription.status, SubscriptionStatus.ACTIVE
            ),
            auto_renew=subscription.auto_renew,
            billing_cycle=_coerce(
                BillingCycle, subscription.billing_cycle, BillingCycle.MONTHLY
            ),
        )


class Payment(BaseModel):
    """A payment recorded against a subscription."""

    id: Annotated[int, Field(description="Payment ID")]
    subscription: Annotated[int | None, Field(description="Subscription ID")] = None
    amount: Annotated[Decimal, Field(description="Amount")]
    payment_date: Annotated[
        datetime | None, Field(description="Payment timestamp")
    ] = None
    method: Annotated[str, Field(description="Payment method")] = "MANUAL"
    status: Annotated[str, Field(description="Payment status")] = (
        PaymentStatus.PENDING.value
    )
    transaction_id: Annotated[
        str | None, Field(description="Provider transaction ID")
    ] = None
    subscription_plan: Annotated[str | None, Field(description="Plan name")] = None
    client_company: Annotated[
        str | None, Field(description="Client company name")
    ] = None

    @property
    def is_pending(self) -> bool:
        """Whether the payment awaits validation."""
        return self.status == PaymentStatus.PENDING.value

    @property
    def method_label(self) -> str:
        """Human readable payment method."""
        if self.method == "MANUAL":
            return "Manual payment"
        return self.method


class PaymentIn(BaseModel):
    """A manual payment declared by a customer."""

    subscription: Annotated[int, Field(description="Subscription ID")]
    amount: Annotated[Decimal, Field(gt=0, description="Amount")]
    method: Annotated[str, Field(description="Payment method")] = "MANUAL"
    status: Annotated[PaymentStatus, Field(description="Initial status")] = (
        PaymentStatus.PENDING
    )


class CheckoutSession(BaseModel):
    """Redirect target of a hosted card checkout."""

    url: Annotated[str | None, Field(description="Checkout page URL")] = None
