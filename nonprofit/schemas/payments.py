"""Request/response schemas for the payment bridge."""

from pydantic import BaseModel, ConfigDict, Field


class PaymentIntentRequest(BaseModel):
    """Body for POST /create-payment-intent."""

    amount: int = Field(
        ...,
        gt=0,
        description="Amount in the smallest currency unit (e.g. cents).",
    )


class PaymentIntentResponse(BaseModel):
    """Opaque client secret relayed from the payment processor."""

    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(..., alias="clientSecret")
