"""Alembic migrations run against throwaway SQLite files."""

from alembic import command
from sqlalchemy import create_engine, inspect

from personapi.cli.db import alembic_config
from personapi.cli.main import main


def _tables(db_file) -> dict[str, set[str]]:
    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        return {
            name: {col["name"] for col in inspector.get_columns(name)}
            for name in inspector.get_table_names()
        }
    finally:
        engine.dispose()


def test_upgrade_and_downgrade_person_table(tmp_path, monkeypatch):
    db_file = tmp_path / "migrate.db"
    monkeypatch.setenv("PERSONAPI_DB_PATH", str(db_file))
    config = alembic_config()

    command.upgrade(config, "head")
    assert _tables(db_file)["person"] == {"id", "name", "email"}

    command.downgrade(config, "base")
    assert "person" not in _tables(db_file)


def test_cli_database_option_wins_over_environment(tmp_path, monkeypatch):
    env_db = tmp_path / "envdb.db"
    flag_db = tmp_path / "flag.db"
    monkeypatch.setenv("PERSONAPI_DB_PATH", str(env_db))

    main(["db", "upgrade", "--database", str(flag_db)])

    assert not env_db.exists()
    assert "person" in _tables(flag_db)
