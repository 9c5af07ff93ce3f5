# Request/response models derived from the ORM entities
from personapi.db.models import Person

from .modelmaker import make_pydantic_model_from_sqlalchemy

PersonCreate = make_pydantic_model_from_sqlalchemy(Person, name_suffix="Create")
PersonRead = make_pydantic_model_from_sqlalchemy(
    Person, name_suffix="Read", exclude_fields=set()
)

__all__ = ["PersonCreate", "PersonRead", "make_pydantic_model_from_sqlalchemy"]
