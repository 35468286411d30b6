"""Director endpoints: public listing, owner-only add/edit/delete with photo upload."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from nonprofit.api.v1.auth import require_owner
from nonprofit.core.config import get_settings
from nonprofit.core.database import get_db
from nonprofit.models import Director
from nonprofit.schemas.common import MessageResponse
from nonprofit.schemas.directors import DirectorOut
from nonprofit.services.storage import UploadError, delete_stored_file, store_upload

logger = logging.getLogger(__name__)
router = APIRouter()


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@router.post(
    "/add-director",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_owner)],
)
def add_director(
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Form()] = None,
    position: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> MessageResponse:
    """
    Add a director from a multipart form with fields name, position and image.

    The photo is stored first and its path (uploads/<name>) saved on the row.
    """
    name, position = _clean(name), _clean(position)
    if not name or not position or image is None or not image.filename:
        raise HTTPException(status_code=400, detail="All fields are required")

    try:
        stored = store_upload(image, get_settings())
    except UploadError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    db.add(Director(name=name, position=position, image=stored.path))
    try:
        db.commit()
    except Exception:
        db.rollback()
        delete_stored_file(stored.path, get_settings())
        raise
    logger.info("Director added: name=%s image=%s", name, stored.path)
    return MessageResponse(message="Director added successfully")


@router.get("/directors", response_model=list[DirectorOut])
def list_directors(db: Annotated[Session, Depends(get_db)]) -> list[Director]:
    return db.query(Director).order_by(Director.id).all()


@router.put(
    "/edit-director/{director_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_owner)],
)
def edit_director(
    director_id: int,
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Form()] = None,
    position: Annotated[str | None, Form()] = None,
    image: Annotated[UploadFile | None, File()] = None,
) -> MessageResponse:
    """Update a director; fields left out keep their current values. A new image replaces the old file."""
    director = db.query(Director).filter(Director.id == director_id).first()
    if director is None:
        raise HTTPException(status_code=404, detail="Director not found")

    old_image = director.image
    new_image = None
    if image is not None and image.filename:
        try:
            new_image = store_upload(image, get_settings()).path
        except UploadError as e:
            raise HTTPException(status_code=400, detail=e.message) from e

    director.name = _clean(name) or director.name
    director.position = _clean(position) or director.position
    director.image = new_image or director.image
    try:
        db.commit()
    except Exception:
        db.rollback()
        delete_stored_file(new_image, get_settings())
        raise

    if new_image and old_image and old_image != new_image:
        delete_stored_file(old_image, get_settings())
    return MessageResponse(message="Director updated successfully")


@router.delete(
    "/delete-director/{director_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_owner)],
)
def delete_director(
    director_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    deleted = (
        db.query(Director)
        .filter(Director.id == director_id)
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        db.rollback()
        raise HTTPException(status_code=404, detail="Director not found")
    db.commit()
    return MessageResponse(message="Director deleted successfully")
