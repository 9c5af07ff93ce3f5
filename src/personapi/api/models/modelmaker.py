"""Derive pydantic request/response models from SQLAlchemy mappings."""

from typing import Any, Optional, Type

from pydantic import BaseModel, ConfigDict, create_model
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase


def _python_type(column) -> Any:
    try:
        return column.type.python_type
    except NotImplementedError:
        return Any


def _may_be_omitted(column) -> bool:
    return bool(column.nullable) or column.default is not None or column.server_default is not None


def make_pydantic_model_from_sqlalchemy(
    model_cls: Type[DeclarativeBase],
    *,
    name_suffix: str = "Create",
    exclude_fields: set[str] = frozenset({"id"}),
    optional_all: bool = False,
) -> Type[BaseModel]:
    """Mirror the mapped columns of ``model_cls`` as ``<Model><name_suffix>``.

    Columns that are nullable or carry a default become ``Optional`` fields
    defaulting to ``None``; ``optional_all`` does that for every column. The
    model validates ORM instances directly (``from_attributes``).
    """
    fields: dict[str, Any] = {}
    for attr in sa_inspect(model_cls).column_attrs:
        if attr.key in exclude_fields:
            continue
        column = attr.columns[0]
        annotation = _python_type(column)
        if optional_all or _may_be_omitted(column):
            fields[attr.key] = (Optional[annotation], None)
        else:
            fields[attr.key] = (annotation, ...)

    return create_model(
        f"{model_cls.__name__}{name_suffix}",
        __config__=ConfigDict(from_attributes=True),
        **fields,
    )
