"""
Database configuration and session management.
Supports SQLite (default) and PostgreSQL through any SQLAlchemy URL.
"""
import logging

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from mood_garden.core.config import settings
from mood_garden.core.logging_config import LogCategory, _sanitize_data

logger = logging.getLogger(LogCategory.DB.value)

database_url = settings.database_url
database_type = settings.database_type

logger.info(f"Using {database_type} database: {_sanitize_data(database_url)}")

if database_type == "sqlite":
    url = make_url(database_url)
    is_sqlite_memory = url.database in (None, "", ":memory:")

    engine_kwargs = {
        "echo": False,
        "connect_args": {
            "check_same_thread": False,
            "timeout": settings.db_connect_timeout,
        },
    }
    if is_sqlite_memory:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **engine_kwargs)
    logger.info(f"Configured SQLite engine ({'in-memory' if is_sqlite_memory else 'file-based'})")

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        """Set SQLite pragmas; CHECK constraints are always on in SQLite."""
        cursor = dbapi_connection.cursor()
        if not is_sqlite_memory:
            cursor.execute("PRAGMA journal_mode=WAL")  # Better concurrency
            cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.close()

elif database_type == "postgresql":
    engine_kwargs = {
        "echo": False,
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 10,
        "pool_recycle": 3600,  # Recycle connections every hour
        "connect_args": {"connect_timeout": settings.db_connect_timeout},
    }

    engine = create_engine(database_url, **engine_kwargs)
    logger.info("Configured PostgreSQL engine with connection pooling")

else:
    engine = create_engine(database_url, echo=False, pool_pre_ping=True)
    logger.warning(
        f"Using untested database type '{database_type}'. "
        "Install the appropriate DB driver for production use."
    )


def check_connection():
    """Run a trivial query; raises if the database cannot be reached."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def create_db_and_tables():
    """Create all tables known to the SQLModel metadata."""
    # Import models so they register with the metadata
    from mood_garden import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


def init_db():
    """
    Initialize the database at startup.

    Any failure here is fatal: the caller lets the exception escape so the
    process stops instead of serving requests without storage.
    """
    logger.info("Connecting to database...")
    try:
        check_connection()
    except Exception as exc:
        logger.error(f"Database connection failed: {_sanitize_data(str(exc))}")
        raise
    logger.info("Database connected")

    create_db_and_tables()
    logger.info("Database initialization completed")


def get_session():
    """Get database session."""
    with Session(engine) as session:
        yield session


def get_session_context():
    """
    Get database session as context manager.

    Use this for scripts and non-request contexts.

    Example:
        with get_session_context() as session:
            # use session
            pass
    """
    return Session(engine)
