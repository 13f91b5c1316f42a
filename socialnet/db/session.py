import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from socialnet.core.config import Settings

logger = logging.getLogger("socialnet")

# Base class for all SQLAlchemy models
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine described by settings.DATABASE_URL"""
    url = settings.DATABASE_URL
    logger.info(f"Connecting to database at {url.split('@')[-1]}")

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live and die with their single connection
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(
            url,
            pool_pre_ping=True,  # Check connection before using from pool
            pool_recycle=3600,   # Recycle connections after 1 hour
        )

    logger.info("Database engine created successfully")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory for database interactions"""
    return sessionmaker(autoflush=False, bind=engine)
