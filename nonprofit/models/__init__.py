"""SQLAlchemy ORM models."""

from nonprofit.models.base import Base
from nonprofit.models.contact_message import ContactMessage
from nonprofit.models.director import Director
from nonprofit.models.event import Event
from nonprofit.models.pledge import Pledge
from nonprofit.models.subscriber import Subscriber
from nonprofit.models.user import User
from nonprofit.models.volunteer import Volunteer

__all__ = [
    "Base",
    "ContactMessage",
    "Director",
    "Event",
    "Pledge",
    "Subscriber",
    "User",
    "Volunteer",
]
