"""SQLAlchemy ORM models."""

from maintenance.models.base import Base
from maintenance.models.master import Master
from maintenance.models.user import User

__all__ = ["Base", "Master", "User"]
