"""Alembic environment for the personapi schema."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from personapi.db.connect import resolve_db_uri
from personapi.db.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def database_url() -> str:
    """Caller-supplied URL, then ``sqlalchemy.url``, then ``PERSONAPI_DB_PATH``/default."""
    explicit = config.attributes.get("database_url") or config.get_main_option(
        "sqlalchemy.url"
    )
    return resolve_db_uri(explicit or None)


def run_migrations_offline() -> None:
    context.configure(
        url=database_url(),
        target_metadata=Base.metadata,
        literal_binds=True,
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(database_url(), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=Base.metadata,
                render_as_batch=True,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
