"""Payment bridge: create a Stripe PaymentIntent and relay its client secret."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import stripe

if TYPE_CHECKING:
    from nonprofit.core.config import Settings

logger = logging.getLogger(__name__)


class PaymentNotConfiguredError(Exception):
    """Raised when a payment is requested but STRIPE_SECRET_KEY is not set."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PaymentError(Exception):
    """Raised when Stripe rejects the request or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _get_api_key(settings: Settings) -> str:
    if settings.STRIPE_SECRET_KEY is None:
        raise PaymentNotConfiguredError("STRIPE_SECRET_KEY is not set.")
    key = settings.STRIPE_SECRET_KEY.get_secret_value()
    if not key or not key.strip():
        raise PaymentNotConfiguredError("STRIPE_SECRET_KEY is not set.")
    return key.strip()


def create_payment_intent(amount: int, settings: Settings) -> str:
    """
    Create a PaymentIntent for amount (smallest currency unit) in PAYMENT_CURRENCY.

    Returns the client secret unchanged. No retries and no idempotency key:
    a failed attempt is surfaced to the caller as PaymentError.
    """
    if amount <= 0:
        raise ValueError("amount must be positive")
    api_key = _get_api_key(settings)
    try:
        intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=settings.PAYMENT_CURRENCY,
            api_key=api_key,
        )
    except stripe.StripeError as e:
        raise PaymentError(
            e.user_message or str(e) or "Stripe request failed",
            status_code=e.http_status,
        ) from e

    client_secret = getattr(intent, "client_secret", None)
    if not client_secret:
        raise PaymentError("Stripe returned a PaymentIntent without a client secret")
    logger.info(
        "Payment intent created",
        extra={"amount": amount, "currency": settings.PAYMENT_CURRENCY},
    )
    return str(client_secret)
