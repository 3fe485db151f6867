#!/usr/bin/env python3
"""
Workboard API launcher.

Usage:
    python run_server.py [--host HOST] [--port PORT] [--reload]

Settings not given on the command line come from the environment / .env
(SERVER_HOST, SERVER_PORT, LOG_LEVEL, DB_PATH, JWT_SECRET, ...).
"""

import argparse
import logging
import sys

import uvicorn

from workboard.c3_app import configure_logging, create_app
from workboard.core.config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Launch uvicorn server."""
    parser = argparse.ArgumentParser(description="Run the Workboard API server")
    parser.add_argument("--host", type=str, help="Bind address (default from SERVER_HOST)")
    parser.add_argument("--port", type=int, help="Bind port (default from SERVER_PORT)")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only)",
    )
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"[Config] Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(settings.log_level)
    host = args.host or settings.server.host
    port = args.port or settings.server.port

    logger.info("=" * 60)
    logger.info("Starting Workboard API")
    logger.info(f"  Host: {host}")
    logger.info(f"  Port: {port}")
    logger.info(f"  Environment: {settings.environment}")
    logger.info(f"  Database: {settings.database.path}")
    logger.info("=" * 60)

    if args.reload:
        uvicorn.run(
            "workboard.c3_app.server:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_level=settings.log_level.lower(),
        )
    else:
        uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
