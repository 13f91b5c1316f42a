import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from socialnet.db.base import Base

logger = logging.getLogger("socialnet")


def create_all_tables(engine: Engine) -> None:
    """Create any missing tables; existing tables are left untouched."""
    existing_tables = inspect(engine).get_table_names()

    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise

    new_tables = set(inspect(engine).get_table_names()) - set(existing_tables)
    if new_tables:
        logger.info(f"Created new tables: {new_tables}")
