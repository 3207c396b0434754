"""Payment services: manual declarations, card checkout and validation."""

from decimal import Decimal

from loguru import logger

from portal.client.http import ApiClient
from portal.core.exceptions import CheckoutUnavailableError
from portal.schemas.billing import CheckoutSession, Payment, PaymentIn


async def list_payments_service(client: ApiClient) -> list[Payment]:
    data = await client.get("/payments/")
    return [Payment.model_validate(item) for item in data or []]


def split_payments(payments: list[Payment]) -> tuple[list[Payment], list[Payment]]:
    """Split payments into (pending, history)."""
    pending = [p for p in payments if p.is_pending]
    history = [p for p in payments if not p.is_pending]
    return pending, history


def _require_positive(amount: Decimal) -> None:
    if amount <= 0:
        raise ValueError("Please enter a valid amount")


async def submit_manual_payment_service(
    subscription_id: int,
    amount: Decimal,
    client: ApiClient,
) -> Payment:
    """Declare a manual payment; it stays PENDING until an admin validates it.

    Raises:
        ValueError: The amount is not positive
    """
    _require_positive(amount)
    payment = PaymentIn(subscription=subscription_id, amount=amount)
    data = await client.post(
        "/payments/",
        json=payment.model_dump(mode="json"),
        error_message="Payment failed",
    )
    logger.bind(subscription_id=subscription_id, amount=str(amount)).info(
        "Manual payment declared"
    )
    return Payment.model_validate(data)


async def start_card_checkout_service(
    subscription_id: int,
    amount: Decimal,
    client: ApiClient,
) -> str:
    """Open a hosted card checkout and return the URL to redirect to.

    Raises:
        ValueError: The amount is not positive
        CheckoutUnavailableError: The API returned no redirect URL
    """
    _require_positive(amount)
    data = await client.post(
        "/payments/create-stripe-checkout/",
        json={"subscription_id": subscription_id, "amount": str(amount)},
        error_message="Unable to start the card payment",
    )
    session = CheckoutSession.model_validate(data or {})
    if not session.url:
        raise CheckoutUnavailableError(
            "No payment URL was received", payload=data
        )
    logger.bind(subscription_id=subscription_id).info("Card checkout started")
    return session.url


async def validate_payment_service(payment_id: int, client: ApiClient) -> list[Payment]:
    """Mark a pending payment as paid, then return the refreshed payments."""
    await client.post(
        f"/payments/{payment_id}/validate_payment/",
        error_message="Validation failed",
    )
    logger.bind(payment_id=payment_id).info("Payment validated")
    return await list_payments_service(client)


async def reject_payment_service(payment_id: int, client: ApiClient) -> list[Payment]:
    """Mark a pending payment as failed, then return the refreshed payments."""
    await client.post(
        f"/payments/{payment_id}/reject_payment/",
        error_message="Rejection failed",
    )
    logger.bind(payment_id=payment_id).info("Payment rejected")
    return await list_payments_service(client)
