"""Request/response schemas for pledges. Wire names are camelCase to match the pledge form."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from nonprofit.schemas.common import NormalizedEmail
from nonprofit.services.dates import normalize_date


class PledgeCreate(BaseModel):
    """Body for POST /pledge."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    salutation: str | None = Field(default=None, max_length=10)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: NormalizedEmail
    phone: str = Field(..., min_length=1, max_length=50)
    address1: str = Field(..., min_length=1)
    address2: str | None = None
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=50)
    zip: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)
    pledge_type: str = Field(..., min_length=1, max_length=50)
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    anonymity: str | None = Field(default=None, max_length=50)
    pledge_date: date
    fulfill_date: date
    signature: str | None = None

    @field_validator("pledge_date", "fulfill_date", mode="before")
    @classmethod
    def normalize_pledge_dates(cls, v: Any) -> Any:
        if v is None or v == "":
            return v
        return normalize_date(v)


class PledgeOut(PledgeCreate):
    """Pledge as listed by GET /pledges."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    email: str
    amount: float
    created_at: datetime | None = None
