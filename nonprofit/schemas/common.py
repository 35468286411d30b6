"""Shared request/response schemas."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr, Field

from nonprofit.services.emails import normalize_email

# A valid address in the one form it is stored and compared in.
NormalizedEmail = Annotated[EmailStr, AfterValidator(normalize_email)]


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by create/update/delete endpoints."""

    message: str = Field(..., description="Human-readable outcome")
