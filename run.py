"""Entry point for the Shop API server.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and the MongoDB connection are read from environment
variables (see ``shop_api.app.core.config``).  The process exits with
a non-zero status if the application fails to start, e.g. when
MongoDB is unreachable.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from shop_api.app.core.config import settings
from shop_api.app.main import app

STARTUP_FAILURE = 3


async def main() -> int:
    """Serve the API until interrupted.  Returns the process exit code."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        lifespan="on",
    )
    server = Server(config)
    await server.serve()
    if not server.started:
        logging.getLogger(__name__).error("Server failed to start")
        return STARTUP_FAILURE
    return 0


if __name__ == "__main__":
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        exit_code = 0
    sys.exit(exit_code)
