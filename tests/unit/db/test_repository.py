import pytest
from sqlalchemy.exc import IntegrityError

from personapi.db.models import Person
from personapi.db.repository import SqlPersonRepository


def test_save_assigns_identifier(db_session):
    repo = SqlPersonRepository(db_session)
    saved = repo.save(Person(name="Alice"))
    assert saved.id == 1
    assert saved.name == "Alice"
    assert saved.email is None


def test_save_assigns_increasing_identifiers(db_session):
    repo = SqlPersonRepository(db_session)
    first = repo.save(Person(name="Alice"))
    second = repo.save(Person(name="Bob", email="bob@example.org"))
    assert second.id == first.id + 1


def test_find_by_id_returns_saved_person(db_session):
    repo = SqlPersonRepository(db_session)
    saved = repo.save(Person(name="Alice", email="alice@example.org"))

    fetched = repo.find_by_id(saved.id)
    assert fetched is not None
    assert fetched.id == saved.id
    assert fetched.name == "Alice"
    assert fetched.email == "alice@example.org"


def test_find_by_id_missing_returns_none(db_session):
    repo = SqlPersonRepository(db_session)
    assert repo.find_by_id(99) is None


def test_save_missing_required_column_propagates(db_session):
    repo = SqlPersonRepository(db_session)
    with pytest.raises(IntegrityError):
        repo.save(Person(email="nobody@example.org"))
    db_session.rollback()


def test_requires_session():
    with pytest.raises(ValueError):
        SqlPersonRepository(None)
