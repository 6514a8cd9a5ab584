"""Core app configuration, database and security."""

from adonstreet.core.config import get_settings, settings
from adonstreet.core.database import get_db
from adonstreet.core.security import TokenService

__all__ = ["get_settings", "settings", "get_db", "TokenService"]
