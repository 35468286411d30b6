"""ORM model for application users (owner login)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from nonprofit.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    Exactly one row is the owner; it is created at startup when missing.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
