from pydantic import BaseModel, ValidationError
import pytest

from personapi.api.models import PersonCreate, PersonRead, make_pydantic_model_from_sqlalchemy
from personapi.db.models import Person


def test_create_model_excludes_id():
    assert issubclass(PersonCreate, BaseModel)
    fields = PersonCreate.model_fields
    assert "id" not in fields
    assert fields["name"].is_required() is True
    assert fields["email"].is_required() is False
    assert fields["email"].default is None


def test_read_model_keeps_id_and_reads_orm_objects():
    fields = PersonRead.model_fields
    assert fields["id"].is_required() is True

    read = PersonRead.model_validate(Person(id=3, name="Alice"))
    assert read.model_dump(exclude_none=True) == {"id": 3, "name": "Alice"}


def test_create_model_requires_name():
    with pytest.raises(ValidationError):
        PersonCreate.model_validate({"email": "a@example.org"})


def test_optional_all_allows_none():
    PersonOptional = make_pydantic_model_from_sqlalchemy(
        Person, name_suffix="Optional", optional_all=True
    )
    assert PersonOptional.__name__ == "PersonOptional"
    assert PersonOptional.model_fields["name"].is_required() is False
    assert PersonOptional().model_dump() == {"name": None, "email": None}
