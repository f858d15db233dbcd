"""Core app configuration and database."""

from folio.core.config import get_settings, settings
from folio.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
