"""User accounts: registration with hashed passwords, credential checks and deletion."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from maintenance.core.security import hash_password, verify_password
from maintenance.models import User
from maintenance.schemas.auth import LoginCredentials, UserCreate

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    """Unknown username or wrong password. Deliberately does not say which."""


class UserWriteError(Exception):
    """The user row could not be inserted or removed."""


def register_user(db: Session, data: UserCreate) -> User:
    """
    Store a new user with a bcrypt hash of the password.

    Raises UserWriteError on any failure (hashing or insert, including a
    duplicate username).
    """
    try:
        password_hash = hash_password(data.password)
    except ValueError as e:
        logger.warning("Hashing password for username=%r failed: %s", data.username, e)
        raise UserWriteError("Could not register user") from e

    user = User(
        username=data.username,
        password_hash=password_hash,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
    )
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Registering username=%r failed: %s", data.username, e)
        raise UserWriteError("Could not register user") from e
    db.refresh(user)
    logger.info("Registered user id=%s username=%r", user.id, user.username)
    return user


def authenticate(db: Session, credentials: LoginCredentials) -> User:
    """Return the user whose stored hash matches the password. Raises InvalidCredentialsError otherwise."""
    try:
        user = db.query(User).filter(User.username == credentials.username).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Looking up username=%r failed: %s", credentials.username, e)
        raise InvalidCredentialsError() from e
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info("Rejected credentials for username=%r", credentials.username)
        raise InvalidCredentialsError()
    return user


def delete_user(db: Session, credentials: LoginCredentials) -> None:
    """
    Re-validate the credentials, then delete the matching row.

    The DELETE matches both the verified id and the username, so a row that was
    replaced between the check and the delete is left alone.
    """
    user = authenticate(db, credentials)
    user_id = user.id
    try:
        deleted = (
            db.query(User)
            .filter(User.id == user_id, User.username == credentials.username)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            db.rollback()
            raise UserWriteError(f"User {user_id} no longer exists")
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Deleting user id=%s failed: %s", user_id, e)
        raise UserWriteError("Could not delete user") from e
    logger.info("Deleted user id=%s", user_id)
