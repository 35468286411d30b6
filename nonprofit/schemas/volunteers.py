"""Request schemas for volunteer sign-up and the contact form."""

from pydantic import BaseModel, Field

from nonprofit.schemas.common import NormalizedEmail


class VolunteerCreate(BaseModel):
    """Body for POST /save-volunteer."""

    name: str = Field(..., min_length=1, max_length=255)
    email: NormalizedEmail
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1)
    interest: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class ContactMessageCreate(BaseModel):
    """Body for POST /contact-us."""

    name: str = Field(..., min_length=1, max_length=255)
    email: NormalizedEmail
    message: str = Field(..., min_length=1)
