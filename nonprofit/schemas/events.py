"""Request/response schemas for event endpoints."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from nonprofit.services.dates import normalize_date


class EventCreate(BaseModel):
    """Body for POST /create-event. Every field is required."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: dt.date = Field(..., description="Any common date format; stored as YYYY-MM-DD")
    time: dt.time = Field(..., description="Start time, e.g. 18:30")
    venue: str = Field(..., min_length=1, max_length=255)

    @field_validator("date", mode="before")
    @classmethod
    def normalize_event_date(cls, v: Any) -> Any:
        if v is None or v == "":
            return v
        return normalize_date(v)


class EventUpdate(BaseModel):
    """Body for PUT /update-event/{id}. Only supplied fields are changed."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    date: dt.date | None = None
    time: dt.time | None = None
    venue: str | None = Field(default=None, min_length=1, max_length=255)

    @field_validator("date", mode="before")
    @classmethod
    def normalize_event_date(cls, v: Any) -> Any:
        if v is None:
            return v
        return normalize_date(v)

    @model_validator(mode="after")
    def require_some_field(self) -> "EventUpdate":
        if not self.model_fields_set:
            raise ValueError("At least one field is required")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields supplied with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EventOut(BaseModel):
    """Event as listed by GET /events."""

    id: int
    title: str
    description: str
    date: dt.date
    time: dt.time
    venue: str
    created_by: str
    created_at: dt.datetime | None = None

    class Config:
        from_attributes = True
