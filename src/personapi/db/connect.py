# personapi/db/connect.py
"""Locating the database and handing out transactional sessions.

One engine and one ``sessionmaker`` exist per database URI for the life of
the process; the schema is created when that pair is first built.
"""

import os
from contextlib import contextmanager
from functools import lru_cache, partial
from pathlib import Path
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from personapi.db.models import initialize_db, sqlite_engine
from personapi.logging import get_logger

logger = get_logger(__file__)

DB_FILENAME = "personapi.db"


def get_db_dir() -> Path:
    """Directory of the default database: ``PERSONAPI_DB_DIR`` or ``~/personapi``."""
    db_dir = Path(os.environ.get("PERSONAPI_DB_DIR", Path.home() / "personapi"))
    db_dir.mkdir(parents=True, exist_ok=True)
    return db_dir


def get_db_path(file: str | Path | None = None) -> str:
    db_file = Path(file) if file is not None else get_db_dir() / DB_FILENAME
    return f"sqlite:///{db_file}"


def resolve_db_uri(file_path: str | Path | None = None) -> str:
    """Turn ``file_path`` into a SQLite URI.

    Without an argument ``PERSONAPI_DB_PATH`` is used, then the default
    database under :func:`get_db_dir`. Values already starting with
    ``sqlite`` are returned untouched.
    """
    target = file_path if file_path is not None else os.getenv("PERSONAPI_DB_PATH")
    if target is None:
        return get_db_path()
    if str(target).startswith("sqlite"):
        return str(target)
    return get_db_path(Path(target).expanduser())


@contextmanager
def _transaction(session_cls: sessionmaker) -> Iterator[Session]:
    session = session_cls()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def make_session_factory(engine: Engine):
    """Return a zero-argument callable opening a commit-or-rollback session scope.

    The schema is expected to exist already (see :func:`initialize_db`).
    """
    return partial(_transaction, sessionmaker(bind=engine, expire_on_commit=False))


@lru_cache(maxsize=None)
def _session_factory_for(db_uri: str):
    logger.info("opening database %s", db_uri)
    engine = sqlite_engine(db_uri)
    initialize_db(engine)
    return make_session_factory(engine)


def get_session(file_path: str | Path | None = None):
    """Session scope for scripts and the CLI, e.g. ``with get_session() as s:``."""
    return _session_factory_for(resolve_db_uri(file_path))()


def get_session_dep() -> Iterator[Session]:
    """FastAPI dependency yielding a request-scoped session."""
    with get_session() as session:
        yield session
