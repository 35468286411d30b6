"""Response schemas for director endpoints."""

from datetime import datetime

from pydantic import BaseModel


class DirectorOut(BaseModel):
    """Director as listed by GET /directors; image is a path under /uploads."""

    id: int
    name: str
    position: str
    image: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
