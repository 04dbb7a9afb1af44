"""
Create the masters and users tables on the configured database. Run from project root:
  python -m maintenance.scripts.init_db

Existing tables are left untouched; there is no migration support.
"""

import logging
import sys

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from maintenance.core.config import ConfigError, get_settings
from maintenance.core.database import build_engine
from maintenance.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> list[str]:
    """Create any missing tables; return the names of all tables in the metadata."""
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    try:
        engine = build_engine(get_settings())
        tables = init_db(engine)
    except (ConfigError, SQLAlchemyError) as e:
        logger.error("Database initialisation failed: %s", e)
        return 1
    logger.info("Tables ready: %s", ", ".join(tables))
    return 0


if __name__ == "__main__":
    sys.exit(main())
