"""Upload endpoint: store one image and return its generated file name."""

from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile

from nonprofit.core.config import get_settings
from nonprofit.schemas.upload import UploadResponse
from nonprofit.services.storage import UploadError, store_upload

router = APIRouter()


@router.post("/upload", response_model=UploadResponse)
def upload_image(
    image: Annotated[UploadFile | None, File()] = None,
) -> UploadResponse:
    """
    Accept a multipart form with a single field named `image`.

    The file is stored as <epoch millis>-<original name> and served at
    /uploads/<image>.
    """
    try:
        stored = store_upload(image, get_settings())
    except UploadError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    return UploadResponse(image=stored.filename)
