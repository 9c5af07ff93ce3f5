# Models package: re-exports the ORM base, entities and engine helpers
from .base import Base
from .person import Person
from .engine import sqlite_engine, initialize_db

__all__ = [
    "Base",
    "Person",
    "sqlite_engine",
    "initialize_db",
]
