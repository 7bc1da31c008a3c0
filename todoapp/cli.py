"""
CLI entry point for ToDoApp.

Usage:
    # Create the database tables
    python -m todoapp.cli init-db

    # Serve the API
    python -m todoapp.cli serve --port 8000
"""

import argparse
import logging

from todoapp.core.config import settings
from todoapp.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create all tables on the configured database."""
    from todoapp.infrastructure.tasks.schema import build_engine, create_schema

    engine = build_engine(args.database_url, echo=settings.database_echo)
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("todoapp.main:app", host=args.host, port=args.port, reload=args.reload)


def main() -> None:
    parser = argparse.ArgumentParser(description="ToDoApp task backend CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy URL (default: from settings)",
    )
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser("serve", help="Serve the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
