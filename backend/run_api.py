#!/usr/bin/env python
"""
Run the Users API server.

Verifies the database is reachable before binding the listener; if it is
not, the process exits with status 1. SIGTERM/SIGINT stop the server
gracefully and close the connection pool.

Usage:
    uv run python run_api.py
    uv run python run_api.py --port 8080
    uv run python run_api.py --reload  # Development mode
"""

import argparse
import logging
import signal
import sys

import uvicorn

from api import create_app
from shared.config import get_settings
from shared.database import Database
from shared.exceptions import StorageError

logger = logging.getLogger("run_api")


def _exit_after_shutdown(signum, frame) -> None:
    logger.info("Shutdown complete")
    sys.exit(0)


def install_shutdown_handlers() -> None:
    """
    Make a termination signal end the process with status 0.

    uvicorn swaps in its own handlers while serving and, once it has shut
    down, restores these and re-raises the signal it caught.
    """
    signal.signal(signal.SIGTERM, _exit_after_shutdown)
    signal.signal(signal.SIGINT, _exit_after_shutdown)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run Users API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument("--log-level", type=str, help="Logging level (e.g. DEBUG, INFO)")
    args = parser.parse_args(argv)

    settings = get_settings()
    log_level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = args.host or settings.host
    port = args.port or settings.port

    if args.reload or settings.reload:
        # The reloader imports the app in a child process; the lifespan
        # performs the connectivity check there.
        uvicorn.run("api:app", host=host, port=port, reload=True, log_level=log_level.lower())
        return

    try:
        database = Database.connect(settings)
    except StorageError as e:
        logger.error("Failed to connect to database: %s", e.message)
        sys.exit(1)
    logger.info("Database connection successful")

    app = create_app(settings, database=database)
    install_shutdown_handlers()
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    main()
