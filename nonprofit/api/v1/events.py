"""Event endpoints: public listing, owner-only create/update/delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nonprofit.api.v1.auth import require_owner
from nonprofit.core.database import get_db
from nonprofit.models import Event
from nonprofit.schemas.auth import CurrentUser
from nonprofit.schemas.common import MessageResponse
from nonprofit.schemas.events import EventCreate, EventOut, EventUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/events", response_model=list[EventOut])
def list_events(db: Annotated[Session, Depends(get_db)]) -> list[Event]:
    """All events, soonest first."""
    return db.query(Event).order_by(Event.date, Event.time, Event.id).all()


@router.post(
    "/create-event",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_event(
    body: EventCreate,
    owner: Annotated[CurrentUser, Depends(require_owner)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Create an event attributed to the authenticated owner. The date is stored as YYYY-MM-DD."""
    event = Event(
        title=body.title,
        description=body.description,
        date=body.date,
        time=body.time,
        venue=body.venue,
        created_by=owner.username,
    )
    db.add(event)
    db.commit()
    logger.info("Event created: id=%s date=%s", event.id, body.date.isoformat())
    return MessageResponse(message="Event created successfully")


@router.put(
    "/update-event/{event_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_owner)],
)
def update_event(
    event_id: int,
    body: EventUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Change the supplied fields of an event; omitted or null fields keep their values."""
    changes = body.changes()
    if not changes:
        raise HTTPException(status_code=400, detail="All fields are required")
    updated = (
        db.query(Event)
        .filter(Event.id == event_id)
        .update(changes, synchronize_session=False)
    )
    if updated == 0:
        db.rollback()
        raise HTTPException(status_code=404, detail="Event not found")
    db.commit()
    return MessageResponse(message="Event updated successfully")


@router.delete(
    "/delete-event/{event_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_owner)],
)
def delete_event(
    event_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    deleted = (
        db.query(Event)
        .filter(Event.id == event_id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise HTTPException(status_code=404, detail="Event not found")
    db.commit()
    return MessageResponse(message="Event deleted successfully")
