"""Pledge endpoints. Public, including listing and deletion, as the website uses them today."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nonprofit.core.database import get_db
from nonprofit.models import Pledge
from nonprofit.schemas.common import MessageResponse
from nonprofit.schemas.pledges import PledgeCreate, PledgeOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/pledge",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_pledge(
    body: PledgeCreate,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Store a pledge; pledgeDate and fulfillDate are normalized to YYYY-MM-DD."""
    pledge = Pledge(**body.model_dump())
    db.add(pledge)
    db.commit()
    logger.info("Pledge submitted: id=%s type=%s", pledge.id, body.pledge_type)
    return MessageResponse(message="Pledge submitted successfully!")


@router.get("/pledges", response_model=list[PledgeOut])
def list_pledges(db: Annotated[Session, Depends(get_db)]) -> list[Pledge]:
    return db.query(Pledge).order_by(Pledge.id).all()


@router.delete("/pledges/{pledge_id}", response_model=MessageResponse)
def delete_pledge(
    pledge_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    deleted = (
        db.query(Pledge)
        .filter(Pledge.id == pledge_id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise HTTPException(status_code=404, detail="Pledge not found")
    db.commit()
    return MessageResponse(message="Pledge deleted successfully!")
