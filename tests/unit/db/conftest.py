import pytest

from personapi.db.connect import make_session_factory
from personapi.db.models import initialize_db, sqlite_engine


@pytest.fixture
def db_session(tmp_path):
    """Session on a fresh database; committed when the test ends."""
    engine = sqlite_engine(f"sqlite:///{tmp_path / 'repository.db'}")
    initialize_db(engine)
    with make_session_factory(engine)() as session:
        yield session
    engine.dispose()
