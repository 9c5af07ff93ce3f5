"""Database maintenance used by ``personapi db``."""

from pathlib import Path
from typing import Any

from sqlalchemy import func, inspect, select, text

from personapi.db.connect import get_session, resolve_db_uri
from personapi.db.models import Person, initialize_db, sqlite_engine
from personapi.logging import get_logger

logger = get_logger(__file__)


def initialize(file_path: str | Path | None = None) -> str:
    """Create the schema in the target database and return its URI."""

    db_uri = resolve_db_uri(file_path)
    logger.info("initializing db at %s", db_uri)
    engine = sqlite_engine(db_uri)
    try:
        initialize_db(engine)
    finally:
        engine.dispose()
    return db_uri


def describe(file_path: str | Path | None = None) -> dict[str, Any]:
    """Summarize the database: URI, SQLite version, person count, migration head.

    ``revision`` is ``None`` when the database was created without Alembic.
    """

    db_uri = resolve_db_uri(file_path)
    with get_session(file_path) as session:
        version = session.execute(text("SELECT sqlite_version()")).scalar_one()
        people = session.execute(select(func.count()).select_from(Person)).scalar_one()
        revision = None
        if inspect(session.connection()).has_table("alembic_version"):
            revision = session.execute(
                text("SELECT version_num FROM alembic_version")
            ).scalar_one_or_none()

    summary = {
        "database": db_uri,
        "sqlite_version": version,
        "people": people,
        "revision": revision,
    }
    logger.info("db status: %s", summary)
    return summary
