"""``personapi api``: run the HTTP service."""

from personapi.logging import get_logger

logger = get_logger(__file__)


def register_subcommands(subparsers):
    subparsers.add_parser("status", help="Explain how to start the server")
    start = subparsers.add_parser("start", help="Serve the person API with uvicorn")
    start.add_argument("--host", default="localhost")
    start.add_argument("--port", type=int, default=8000)


def serve(host: str, port: int) -> None:
    import uvicorn

    from personapi.api.main import app

    logger.info("serving personapi on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port)


def dispatch(args):
    if args.subcommand == "start":
        serve(args.host, args.port)
    elif args.subcommand == "status":
        logger.info("not started here; run `personapi api start`")
    else:
        raise ValueError(f"No handler for api subcommand: {args.subcommand}")
