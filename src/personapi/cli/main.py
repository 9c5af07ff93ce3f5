"""Entry point of the ``personapi`` console script."""

import argparse

from personapi.cli import api, db, logging as logging_cli

COMMANDS = {
    "api": (api, "Run the HTTP service"),
    "db": (db, "Create, inspect and migrate the database"),
    "logging": (logging_cli, "Log level and location"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="personapi", description="Person service toolkit")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (module, help_text) in COMMANDS.items():
        group = commands.add_parser(name, help=help_text)
        module.register_subcommands(group.add_subparsers(dest="subcommand", required=True))
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    module, _ = COMMANDS[args.command]
    module.dispatch(args)
