"""Master endpoint persistence: one independent transaction per operation on the masters table."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from maintenance.models import Master
from maintenance.schemas.master import MasterIn

logger = logging.getLogger(__name__)


class MasterError(Exception):
    """Base error for master operations; the database session has been rolled back."""


class MasterNotFoundError(MasterError):
    """No master row matches the requested id."""

    def __init__(self, master_id: int) -> None:
        super().__init__(f"Master {master_id} not found")
        self.master_id = master_id


class MasterWriteError(MasterError):
    """The INSERT/UPDATE/DELETE was rejected by the database (e.g. duplicate name)."""


def list_masters(db: Session) -> list[Master]:
    """Return all masters in insertion order. An empty table yields an empty list."""
    try:
        return db.query(Master).order_by(Master.id).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Listing masters failed: %s", e)
        raise MasterError("Could not list masters") from e


def get_master(db: Session, master_id: int) -> Master:
    try:
        master = db.query(Master).filter(Master.id == master_id).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Fetching master id=%s failed: %s", master_id, e)
        raise MasterError(f"Could not fetch master {master_id}") from e
    if master is None:
        raise MasterNotFoundError(master_id)
    return master


def create_master(db: Session, data: MasterIn) -> Master:
    """
    Insert a new master and return it with its generated id.

    Raises MasterWriteError on any database failure; a duplicate name is not
    reported separately.
    """
    master = Master(name=data.name, host=data.host, port=data.port)
    db.add(master)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Creating master name=%r failed: %s", data.name, e)
        raise MasterWriteError("Could not create master") from e
    db.refresh(master)
    logger.info("Created master id=%s name=%r", master.id, master.name)
    return master


def update_master(db: Session, master_id: int, data: MasterIn) -> None:
    """
    Overwrite name, host and port of an existing master.

    Raises MasterNotFoundError when no row has master_id (nothing is changed) and
    MasterWriteError on database failures.
    """
    try:
        updated = (
            db.query(Master)
            .filter(Master.id == master_id)
            .update(
                {Master.name: data.name, Master.host: data.host, Master.port: data.port},
                synchronize_session=False,
            )
        )
        if updated == 0:
            db.rollback()
            raise MasterNotFoundError(master_id)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Updating master id=%s failed: %s", master_id, e)
        raise MasterWriteError(f"Could not update master {master_id}") from e
    logger.info("Updated master id=%s", master_id)


def delete_master(db: Session, master_id: int) -> None:
    """Delete a master by id. Raises MasterNotFoundError when no row was removed."""
    try:
        deleted = (
            db.query(Master)
            .filter(Master.id == master_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            db.rollback()
            raise MasterNotFoundError(master_id)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Deleting master id=%s failed: %s", master_id, e)
        raise MasterWriteError(f"Could not delete master {master_id}") from e
    logger.info("Deleted master id=%s", master_id)
