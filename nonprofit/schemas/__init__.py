"""Pydantic request/response schemas."""

from nonprofit.schemas.auth import CurrentUser, LoginRequest, TokenResponse
from nonprofit.schemas.common import MessageResponse
from nonprofit.schemas.directors import DirectorOut
from nonprofit.schemas.events import EventCreate, EventOut, EventUpdate
from nonprofit.schemas.health import HealthResponse
from nonprofit.schemas.payments import PaymentIntentRequest, PaymentIntentResponse
from nonprofit.schemas.pledges import PledgeCreate, PledgeOut
from nonprofit.schemas.subscribers import SubscribeRequest, SubscriberOut
from nonprofit.schemas.upload import UploadResponse
from nonprofit.schemas.volunteers import ContactMessageCreate, VolunteerCreate

__all__ = [
    "ContactMessageCreate",
    "CurrentUser",
    "DirectorOut",
    "EventCreate",
    "EventOut",
    "EventUpdate",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "PledgeCreate",
    "PledgeOut",
    "SubscribeRequest",
    "SubscriberOut",
    "TokenResponse",
    "UploadResponse",
    "VolunteerCreate",
]
