from typing import Optional

from sqlalchemy import event
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from lexibridge.core.config import settings, normalize_database_url
from lexibridge.core.exceptions import ConfigurationError, UnsupportedBackendError
import logging

logger = logging.getLogger(__name__)

# Dialect-specific INSERT constructs that support ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

_engine: Optional[Engine] = None


def _configure_sqlite(engine: Engine) -> None:
    """Enforce foreign keys and let SQLAlchemy manage BEGIN/SAVEPOINT itself."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Disable pysqlite's own transaction handling so SAVEPOINT works
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_db_engine(database_url: Optional[str] = None) -> Engine:
    """
    Create a database engine.

    Args:
        database_url: Database URL; defaults to the configured DATABASE_URL

    Returns:
        A SQLAlchemy engine

    Raises:
        ConfigurationError: If no database URL is available
    """
    db_url = normalize_database_url(database_url or settings.database_url)
    if not db_url:
        raise ConfigurationError("DATABASE_URL environment variable is required")

    url = make_url(db_url)
    logger.info(f"Connecting to database: {db_url[:20]}...")  # Log partial URL for debugging

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # Share one connection so every session sees the same in-memory database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(db_url, echo=settings.database_echo, **kwargs)
        _configure_sqlite(engine)
        return engine

    return create_engine(
        db_url,
        echo=settings.database_echo,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )


def get_engine() -> Engine:
    """Return the process-wide engine, creating it from settings on first use."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def get_session(engine: Optional[Engine] = None):
    """Yield a database session; the caller owns commit and rollback."""
    with Session(engine or get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None):
    """Initialize database tables."""
    # Import models to register them with SQLModel
    from lexibridge import models  # noqa: F401

    SQLModel.metadata.create_all(engine or get_engine())


def upsert_insert(session: Session, model):
    """
    Return an INSERT construct for `model` that supports on_conflict_do_update.

    Raises:
        UnsupportedBackendError: If the session's database has no native upsert
    """
    dialect_name = session.get_bind().dialect.name
    try:
        insert = _UPSERT_INSERTS[dialect_name]
    except KeyError:
        raise UnsupportedBackendError(
            f"Atomic upsert is not supported for the '{dialect_name}' backend"
        ) from None
    return insert(model)
