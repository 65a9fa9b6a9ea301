"""Database initialization utilities."""
from typing import Optional

from sqlalchemy.engine import Engine

from hostel_allocation.config.logging import get_logger
from hostel_allocation.db.base import Base, import_models
from hostel_allocation.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create any missing tables.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations.
    """
    bind = bind or default_engine
    try:
        import_models()
        Base.metadata.create_all(bind=bind)
        logger.info(f"Database ready with tables: {', '.join(sorted(Base.metadata.tables))}")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(bind: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Use with caution.
    """
    bind = bind or default_engine
    try:
        import_models()
        Base.metadata.drop_all(bind=bind)
        logger.warning("All database tables dropped")
    except Exception as e:
        logger.error(f"Error dropping database: {e}")
        raise
