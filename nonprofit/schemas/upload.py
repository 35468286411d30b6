"""Response schema for the upload endpoint."""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Stored file name; the file is served at /uploads/<image>."""

    image: str = Field(..., description="Generated file name under the upload directory.")
