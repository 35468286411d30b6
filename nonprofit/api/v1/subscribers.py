"""Newsletter subscription endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nonprofit.core.database import get_db
from nonprofit.models import Subscriber
from nonprofit.schemas.common import MessageResponse
from nonprofit.schemas.subscribers import SubscribeRequest, SubscriberOut
from nonprofit.services.emails import normalize_email

router = APIRouter()

ALREADY_SUBSCRIBED = "Email is already subscribed!"


@router.post(
    "/subscribe",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def subscribe(
    body: SubscribeRequest,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    existing = db.query(Subscriber.id).filter(Subscriber.email == body.email).first()
    if existing is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=ALREADY_SUBSCRIBED)

    db.add(Subscriber(email=body.email))
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=ALREADY_SUBSCRIBED) from e
    return MessageResponse(message="Subscription successful!")


@router.get("/subscribers", response_model=list[SubscriberOut])
def list_subscribers(db: Annotated[Session, Depends(get_db)]) -> list[Subscriber]:
    return db.query(Subscriber).order_by(Subscriber.id).all()


@router.delete("/unsubscribe/{email}", response_model=MessageResponse)
def unsubscribe(
    email: str,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    deleted = (
        db.query(Subscriber)
        .filter(Subscriber.email == normalize_email(email))
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise HTTPException(status_code=404, detail="Subscriber not found")
    db.commit()
    return MessageResponse(message="Unsubscribed successfully!")
