"""Pydantic models mirroring the provisioning API records."""

from portal.schemas.account import (
    ActiveSubscriptionSummary,
    ClientProfile,
    ClientUser,
    RegistrationRequest,
    TokenPair,
    UserInfo,
)
from portal.schemas.billing import (
    BillingCycle,
    CheckoutSession,
    Payment,
    PaymentIn,
    PaymentStatus,
    Plan,
    PlanIn,
    Subscription,
    SubscriptionIn,
    SubscriptionStatus,
)
from portal.schemas.dashboard import AdminOverview, InstanceStats
from portal.schemas.instance import Instance, InstanceCreate

__all__ = [
    "ActiveSubscriptionSummary",
    "AdminOverview",
    "BillingCycle",
    "CheckoutSession",
    "ClientProfile",
    "ClientUser",
    "Instance",
    "InstanceCreate",
    "InstanceStats",
    "Payment",
    "PaymentIn",
    "PaymentStatus",
    "Plan",
    "PlanIn",
    "RegistrationRequest",
    "Subscription",
    "SubscriptionIn",
    "SubscriptionStatus",
    "TokenPair",
    "UserInfo",
]
