"""ORM model for public events managed by the owner."""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, Time, func

from nonprofit.models.base import Base


class Event(Base):
    """An event listed on the website. created_by holds the username from the token."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(Time, nullable=False)
    venue = Column(String(255), nullable=False)
    created_by = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
