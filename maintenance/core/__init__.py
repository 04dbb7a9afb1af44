"""Core app configuration, database and security."""

from maintenance.core.config import DatabaseConfig, Settings, get_settings
from maintenance.core.database import get_db

__all__ = ["DatabaseConfig", "Settings", "get_settings", "get_db"]
