"""``personapi logging``: inspect and persist the log level."""

import logging

from personapi.logging import get_logger, reset_logger
from personapi.logging.config import save_log_level
from personapi.logging.logging import _resolve_log_file, get_configured_level

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def register_subcommands(subparsers):
    subparsers.add_parser("set-level", help="Persist the log level").add_argument(
        "level", choices=LEVELS
    )
    subparsers.add_parser("show-path", help="Print the log file path")
    subparsers.add_parser("show-level", help="Print the effective log level")


def dispatch(args):
    if args.subcommand == "set-level":
        save_log_level(args.level)
        reset_logger()
        get_logger(level=getattr(logging, args.level))
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        print(get_configured_level())
    else:
        raise ValueError(f"No handler for logging subcommand: {args.subcommand}")
