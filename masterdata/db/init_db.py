"""
Database initialization
Creates any missing tables; existing tables are left untouched.
"""
import logging

from sqlalchemy.engine import Engine

from masterdata.db.base import Base
import masterdata.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create missing tables for every registered model"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables verified: %s", ", ".join(sorted(Base.metadata.tables)))
