from sqlmodel import SQLModel, Session
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from ligas_backend.core import config
from ligas_backend.core.logger import setup_logger

logger = setup_logger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Creates a sync engine for the given URL.
    SQLite connections get a busy timeout (writers wait instead of failing)
    and foreign key enforcement, which SQLite leaves off by default.
    """
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {}
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": config.SQLITE_BUSY_TIMEOUT_SECONDS}

    new_engine = create_engine(database_url, echo=echo, future=True, connect_args=connect_args)

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# --- Engine ---
engine = build_engine(config.DATABASE_URL, echo=config.SQL_ECHO)


# --- Initialize DB tables ---
def init_db():
    """Create tables if they don't exist."""
    # Import models so every table is registered on SQLModel.metadata
    from ligas_backend import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


# --- Session for seeding/scripts ---
def get_sync_session() -> Session:
    return Session(engine)


# --- DB session (used in routes) ---
def get_session():
    with Session(engine) as session:
        yield session
