"""Payment endpoint: create a Stripe PaymentIntent for a donation."""

import logging

from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool

from nonprofit.core.config import get_settings
from nonprofit.schemas.payments import PaymentIntentRequest, PaymentIntentResponse
from nonprofit.services.payments import (
    PaymentError,
    PaymentNotConfiguredError,
    create_payment_intent,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def post_create_payment_intent(body: PaymentIntentRequest) -> PaymentIntentResponse:
    """Return the client secret the frontend uses to confirm the card payment."""
    try:
        client_secret = await run_in_threadpool(
            create_payment_intent, body.amount, get_settings()
        )
    except PaymentNotConfiguredError as e:
        logger.error("Payment intent failed: %s", e.message)
        raise HTTPException(status_code=500, detail="Internal Server Error") from e
    except PaymentError as e:
        logger.error(
            "Payment intent failed",
            extra={"amount": body.amount, "reason": (e.message or str(e))[:500]},
        )
        raise HTTPException(status_code=500, detail="Internal Server Error") from e
    return PaymentIntentResponse(client_secret=client_secret)
