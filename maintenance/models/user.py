"""ORM model for user accounts."""

from sqlalchemy import Column, Integer, String

from maintenance.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    password_hash holds a bcrypt hash; plain passwords are never stored.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False, default="")
    last_name = Column(String(255), nullable=False, default="")
    email = Column(String(320), nullable=False, default="")
