"""Core app configuration and database."""

from nonprofit.core.config import get_settings, settings
from nonprofit.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
