"""Public form endpoints: volunteer sign-up and contact-us messages."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nonprofit.core.database import get_db
from nonprofit.models import ContactMessage, Volunteer
from nonprofit.schemas.common import MessageResponse
from nonprofit.schemas.volunteers import ContactMessageCreate, VolunteerCreate

router = APIRouter()

DUPLICATE_VOLUNTEER = "Volunteer with this email already exists"


@router.post("/save-volunteer", response_model=MessageResponse)
def save_volunteer(
    body: VolunteerCreate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Record a volunteer sign-up. One sign-up per email address (409 on repeat)."""
    existing = db.query(Volunteer.id).filter(Volunteer.email == body.email).first()
    if existing is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_VOLUNTEER)

    db.add(Volunteer(**body.model_dump()))
    try:
        db.commit()
    except IntegrityError as e:
        # Lost the race against a concurrent sign-up with the same email.
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_VOLUNTEER) from e
    return MessageResponse(message="Volunteer data saved successfully")


@router.post("/contact-us", response_model=MessageResponse)
def contact_us(
    body: ContactMessageCreate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    db.add(ContactMessage(**body.model_dump()))
    db.commit()
    return MessageResponse(message="Your message has been submitted successfully!")
