"""Engine construction for the SQLite store behind the person routes."""

import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from personapi.logging import get_logger

from .base import Base

logger = get_logger(__file__)

DEFAULT_DB_URI = "sqlite:///./personapi.db"


def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
    dbapi_connection.execute("PRAGMA foreign_keys=ON")


def _log_statement(_conn, _cursor, statement, parameters, _context, _executemany):
    logger.info("%s %s", statement, parameters)


def sqlite_engine(db_uri: str = DEFAULT_DB_URI, *, trace: bool | None = None) -> Engine:
    """Create a thread-shareable SQLite engine.

    ``trace`` logs every statement; it defaults to whether
    ``PERSONAPI_SQL_TRACE`` is set.
    """
    engine = create_engine(db_uri, connect_args={"check_same_thread": False})
    event.listen(engine, "connect", _enable_foreign_keys)

    if trace is None:
        trace = bool(os.getenv("PERSONAPI_SQL_TRACE"))
    if trace:
        event.listen(engine, "before_cursor_execute", _log_statement)
    return engine


def initialize_db(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
