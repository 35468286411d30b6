"""ORM model for board directors shown on the website."""

from sqlalchemy import Column, DateTime, Integer, String, func

from nonprofit.models.base import Base


class Director(Base):
    """A director; image is the relative path of the uploaded photo (uploads/<name>)."""

    __tablename__ = "directors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    image = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
