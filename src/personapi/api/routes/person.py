# api/routes/person.py
from typing import Annotated, Callable

from fastapi import APIRouter, Depends, Path, Response, status

from personapi.api.models import PersonCreate, PersonRead
from personapi.db.models import Person
from personapi.db.repository import PersonRepository, get_person_repository
from personapi.logging import get_logger

logger = get_logger(__file__)

# SQLite INTEGER is a signed 64-bit value
MIN_PERSON_ID, MAX_PERSON_ID = -(2**63), 2**63 - 1


def generate_person_router(
    *,
    get_repository: Callable[..., PersonRepository] = get_person_repository,
    prefix: str = "/person",
    tag: str = "Person",
) -> APIRouter:
    """
    Create a FastAPI router exposing lookup and creation endpoints for ``Person``.

      - `GET /{id}` – Return the person, or an empty 404 when absent.
      - `POST /` – Save the person from the body and return it with its new id.

    Parameters
    ----------
    get_repository : callable
        FastAPI dependency returning (or yielding) the
        :class:`~personapi.db.repository.PersonRepository` each request uses.
        Defaults to the SQLAlchemy-backed repository on the request session.
    prefix : str
        URL path prefix for all routes in the router.
    tag : str
        Tag name for OpenAPI grouping.

    Returns
    -------
    APIRouter
    """

    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get(
        "/{id}",
        response_model=PersonRead,
        response_model_exclude_none=True,
        responses={status.HTTP_404_NOT_FOUND: {"description": f"{tag} not found"}},
    )
    def get_person(
        id: Annotated[int, Path(ge=MIN_PERSON_ID, le=MAX_PERSON_ID)],
        repository: PersonRepository = Depends(get_repository),
    ):
        person = repository.find_by_id(id)
        if person is None:
            logger.debug("%s %s not found", tag, id)
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return PersonRead.model_validate(person)

    @router.post(
        "",
        response_model=PersonRead,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create new {tag}",
    )
    @router.post(
        "/",
        response_model=PersonRead,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create new {tag}",
        include_in_schema=False,
    )
    def create_person(
        payload: PersonCreate,
        repository: PersonRepository = Depends(get_repository),
    ):
        saved = repository.save(Person(**payload.model_dump()))
        return PersonRead.model_validate(saved)

    return router
