"""``personapi db``: create, inspect and migrate the person database."""

from pathlib import Path
from typing import Any, Mapping

from alembic import command
from alembic.config import Config
from rich.console import Console
from rich.table import Table

from personapi.db import operations
from personapi.db.connect import resolve_db_uri
from personapi.logging import get_logger

logger = get_logger(__file__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def register_subcommands(subparsers):
    init_parser = subparsers.add_parser("init", help="Create the person table")
    init_parser.add_argument("--file", help="SQLite file to initialize")

    status_parser = subparsers.add_parser("status", help="Summarize the database")
    status_parser.add_argument("--file", help="SQLite file to inspect")

    for action, default in (("upgrade", "head"), ("downgrade", "-1")):
        parser = subparsers.add_parser(action, help=f"Alembic {action}")
        parser.add_argument(
            "revision", nargs="?", default=default, help=f"target revision (default: {default})"
        )
        parser.add_argument(
            "--database", help="SQLite path or URI; overrides PERSONAPI_DB_PATH"
        )


def dispatch(args):
    """Run the database command named by ``args.subcommand``.

    Unknown subcommands raise ``ValueError``.
    """
    if args.subcommand == "init":
        print(operations.initialize(file_path=args.file))
    elif args.subcommand == "status":
        render_status(operations.describe(args.file))
    elif args.subcommand in ("upgrade", "downgrade"):
        migrate(args.subcommand, args.revision, database=args.database)
    else:
        raise ValueError(f"No handler for db subcommand: {args.subcommand}")


def render_status(summary: Mapping[str, Any], console: Console | None = None) -> None:
    table = Table(title="personapi database", show_header=False)
    table.add_column(style="bold cyan")
    table.add_column()
    for key, value in summary.items():
        table.add_row(key, "[dim]none[/dim]" if value is None else str(value))
    (console or Console()).print(table)


def alembic_config(database: str | None = None) -> Config:
    """Alembic config for the bundled migrations.

    An explicit ``database`` is stored in ``config.attributes["database_url"]``,
    which ``alembic/env.py`` prefers over every other source.
    """
    ini = PROJECT_ROOT / "alembic.ini"
    config = Config(str(ini)) if ini.exists() else Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    if database and database.strip():
        config.attributes["database_url"] = resolve_db_uri(database.strip())
    return config


def migrate(action: str, revision: str, database: str | None = None) -> None:
    config = alembic_config(database)
    target = config.attributes.get("database_url", "the configured database")
    logger.info("alembic %s %s on %s", action, revision, target)
    getattr(command, action)(config, revision)
