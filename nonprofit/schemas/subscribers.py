"""Request/response schemas for newsletter subscriptions."""

from datetime import datetime

from pydantic import BaseModel

from nonprofit.schemas.common import NormalizedEmail


class SubscribeRequest(BaseModel):
    """Body for POST /subscribe."""

    email: NormalizedEmail


class SubscriberOut(BaseModel):
    id: int
    email: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True
