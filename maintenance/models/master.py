"""ORM model for master endpoints (remote hosts under maintenance)."""

from sqlalchemy import Column, Integer, String

from maintenance.models.base import Base


class Master(Base):
    """A remote master endpoint. Names are unique across the table."""

    __tablename__ = "masters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    host = Column(String(255), nullable=False)
    port = Column(Integer, nullable=False)
