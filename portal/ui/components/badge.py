"""Status badges.

Every status is mapped to one of five variants (success, warning, error,
neutral, info) which in turn map to a Quasar color.
"""

from nicegui import ui

from portal.schemas.billing import (
    Payment,
    PaymentStatus,
    Subscription,
    SubscriptionStatus,
)
from portal.schemas.instance import Instance

VARIANT_COLORS = {
    "success": "positive",
    "warning": "warning",
    "error": "negative",
    "neutral": "grey-6",
    "info": "info",
}

PAYMENT_VARIANTS = {
    PaymentStatus.PAID.value: "success",
    PaymentStatus.PENDING.value: "warning",
    PaymentStatus.FAILED.value: "error",
    PaymentStatus.REFUNDED.value: "neutral",
}

SUBSCRIPTION_VARIANTS = {
    SubscriptionStatus.ACTIVE.value: "success",
    SubscriptionStatus.PENDING.value: "warning",
    SubscriptionStatus.SUSPENDED.value: "error",
    SubscriptionStatus.EXPIRED.value: "neutral",
}


def status_badge(label: str, variant: str = "info") -> ui.badge:
    return ui.badge(label, color=VARIANT_COLORS.get(variant, "info")).props("rounded")


def instance_badge(instance: Instance) -> ui.badge:
    badge = status_badge(instance.status_label, instance.variant)
    if instance.is_pending:
        with badge:
            ui.spinner(size="xs", color="white").classes("ml-1")
    return badge


def payment_badge(payment: Payment) -> ui.badge:
    return status_badge(payment.status, PAYMENT_VARIANTS.get(payment.status, "info"))


def subscription_badge(subscription: Subscription) -> ui.badge:
    return status_badge(
        subscription.status, SUBSCRIPTION_VARIANTS.get(subscription.status, "info")
    )
