"""ORM model for contact-us form submissions."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from nonprofit.models.base import Base


class ContactMessage(Base):
    __tablename__ = "contact_us"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
