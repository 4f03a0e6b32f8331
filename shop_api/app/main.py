"""
Main entrypoint for the Shop API.

This module assembles the FastAPI application.  ``create_app`` sets
up logging, installs the exception handlers that shape every error
response, includes the v1 routers and registers a lifespan that owns
the two long-lived dependencies:

* the MongoDB client, connected (and pinged) before the first request
  is accepted; a failed connection aborts startup;
* the game catalog client.

Both are stored on ``app.state`` and handed to handlers through the
providers in ``api.deps``.  Tests pass ready-made ``database`` and
``catalog`` objects, in which case nothing is connected or closed by
the lifespan.  The module-level ``app`` can be served directly::

    uvicorn shop_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import connect_database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.game_catalog import GameCatalogClient

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Settings] = None,
    *,
    database: Any = None,
    catalog: Optional[GameCatalogClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use.  Defaults to the module-level ``settings``.
    database : Any
        An already opened database handle.  When given, the lifespan
        does not connect to MongoDB.
    catalog : Optional[GameCatalogClient]
        An already built catalog client.  When given, the lifespan
        neither creates nor closes one.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        owns_catalog = False
        if app.state.database is None:
            client = await connect_database(config)
            app.state.database = client[config.database_name]
        if app.state.catalog is None:
            app.state.catalog = GameCatalogClient(
                base_url=config.catalog_base_url,
                timeout=config.catalog_timeout,
            )
            owns_catalog = True
        logger.info("%s %s ready", config.project_name, config.api_version)
        try:
            yield
        finally:
            if owns_catalog:
                app.state.catalog.close()
            if client is not None:
                await client.close()
            logger.info("Stop server")

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.catalog = catalog

    register_exception_handlers(app)
    app.include_router(v1_router)

    @app.get("/", tags=["root"])
    async def read_root() -> dict:
        return {"message": "Hello World!"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
