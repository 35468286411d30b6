"""ORM model for donation pledges."""

from sqlalchemy import Column, Date, DateTime, Integer, Numeric, String, Text, func

from nonprofit.models.base import Base


class Pledge(Base):
    """
    A pledge submitted from the public pledge form.

    Column names are snake_case; the API exposes the form's camelCase names.
    """

    __tablename__ = "pledges"

    id = Column(Integer, primary_key=True, autoincrement=True)
    salutation = Column(String(10), nullable=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=False)
    address1 = Column(Text, nullable=False)
    address2 = Column(Text, nullable=True)
    city = Column(String(100), nullable=False)
    state = Column(String(50), nullable=False)
    zip = Column(String(20), nullable=False)
    country = Column(String(100), nullable=False)
    pledge_type = Column(String(50), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    anonymity = Column(String(50), nullable=True)
    pledge_date = Column(Date, nullable=False)
    fulfill_date = Column(Date, nullable=False)
    signature = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
