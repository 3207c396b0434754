"""Subscription services and current-subscription selection."""

from decimal import Decimal

from loguru import logger

from portal.client.http import ApiClient
from portal.schemas.billing import (
    BillingCycle,
    Subscription,
    SubscriptionIn,
    SubscriptionStatus,
)


async def list_subscriptions_service(client: ApiClient) -> list[Subscription]:
    data = await client.get("/subscriptions/")
    return [Subscription.model_validate(item) for item in data or []]


async def get_subscription_service(
    subscription_id: int, client: ApiClient
) -> Subscription:
    data = await client.get(
        f"/subscriptions/{subscription_id}/",
        error_message="Subscription not found",
    )
    return Subscription.model_validate(data)


async def save_subscription_service(
    subscription: SubscriptionIn,
    client: ApiClient,
    subscription_id: int | None = None,
) -> list[Subscription]:
    """Create or update a subscription as an administrator, then re-fetch."""
    payload = subscription.model_dump(mode="json")
    if subscription_id is None:
        await client.post(
            "/subscriptions/",
            json=payload,
            error_message="Unable to save the subscription",
        )
        logger.bind(client=subscription.client, plan=subscription.plan).info(
            "Subscription created"
        )
    else:
        await client.put(
            f"/subscriptions/{subscription_id}/",
            json=payload,
            error_message="Unable to save the subscription",
        )
        logger.bind(subscription_id=subscription_id).info("Subscription updated")
    return await list_subscriptions_service(client)


async def subscribe_to_plan_service(
    plan_id: int,
    client: ApiClient,
    billing_cycle: BillingCycle = BillingCycle.MONTHLY,
) -> Subscription:
    """Subscribe the signed-in customer to a plan.

    The API creates the subscription as PENDING until a payment is validated.
    """
    data = await client.post(
        "/subscriptions/",
        json={"plan": plan_id, "billing_cycle": billing_cycle.value},
        error_message="Unable to subscribe to this plan",
    )
    logger.bind(plan_id=plan_id).info("Subscribed to plan")
    return Subscription.model_validate(data)


def select_current_subscription(
    subscriptions: list[Subscription],
) -> Subscription | None:
    """The subscription a customer sees: ACTIVE first, then PENDING, then any."""
    for status in (SubscriptionStatus.ACTIVE, SubscriptionStatus.PENDING):
        for subscription in subscriptions:
            if subscription.status == status.value:
                return subscription
    return subscriptions[0] if subscriptions else None


def find_pending_subscription(
    subscriptions: list[Subscription],
) -> Subscription | None:
    return next((s for s in subscriptions if s.is_pending), None)


async def find_payable_subscription_service(
    client: ApiClient,
    subscription_id: int | None = None,
) -> Subscription | None:
    """The subscription the payment page settles.

    An explicit id wins; otherwise the first PENDING subscription is used.
    """
    if subscription_id is not None:
        return await get_subscription_service(subscription_id, client)
    return find_pending_subscription(await list_subscriptions_service(client))


def default_payment_amount(subscription: Subscription) -> Decimal:
    """Amount pre-filled on the payment form."""
    if subscription.has_amount_due:
        return subscription.amount_due or Decimal(0)
    return subscription.plan_price or Decimal(0)
