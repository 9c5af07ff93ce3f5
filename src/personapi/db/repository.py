# repository.py
from typing import Iterator, Optional, Protocol

from fastapi import Depends
from sqlalchemy.orm import Session

from personapi.db.connect import get_session_dep
from personapi.db.models import Person
from personapi.logging import get_logger


logger = get_logger(__file__)


class PersonRepository(Protocol):
    """Lookup and save operations the person routes depend on."""

    def find_by_id(self, id: int) -> Optional[Person]: ...

    def save(self, person: Person) -> Person: ...


class SqlPersonRepository:
    """SQLAlchemy-backed :class:`PersonRepository`.

    Session errors are not caught here; the caller's session scope rolls the
    transaction back and re-raises.
    """

    model = Person

    def __init__(self, session: Session):
        if session is None:
            raise ValueError("A database session is required.")
        self.session = session

    def find_by_id(self, id: int) -> Optional[Person]:
        return self.session.get(self.model, id)

    def save(self, person: Person) -> Person:
        self.session.add(person)
        self.session.commit()
        self.session.refresh(person)
        logger.info(f"Saved into {self.model.__tablename__}: id={person.id}")
        return person


def get_person_repository(
    db: Session = Depends(get_session_dep),
) -> Iterator[PersonRepository]:
    """FastAPI dependency providing a repository bound to the request session."""

    yield SqlPersonRepository(db)
