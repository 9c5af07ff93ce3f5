# Shared SQLAlchemy declarative base
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    __table_args__ = {"sqlite_autoincrement": True}
