"""
Main entrypoint for the Customer Directory API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app`` so it can be served directly::

    uvicorn customer_directory_api.app.main:app --port 3000

The store client is created here (or injected by the caller, as the
tests do), opened when the application starts and closed when it
shuts down.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import StoreClient, init_db
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    store: StoreClient = app.state.store
    store.open()
    try:
        if settings.init_schema:
            init_db(store)
        yield
    finally:
        store.close()


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    logger.info("Rejected %s %s: invalid %s", request.method, request.url.path, ", ".join(fields))
    return JSONResponse(status_code=422, content={"error": "Invalid request"})


def create_app(store: Optional[StoreClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[StoreClient]
        Store client used by every request.  When omitted, one is
        built from ``settings``.  It is opened on startup and closed
        on shutdown either way.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the routers and
    # the store can log from their first request.
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = StoreClient(
            settings.database_url,
            sslmode=settings.database_sslmode,
            min_connections=settings.db_pool_min,
            max_connections=settings.db_pool_max,
        )

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store

    # Every error body has the shape {"error": <message>}.
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # The same routes are served at the root and under /api/v1.  Only the
    # root copy appears in the OpenAPI document to avoid duplicate
    # operation IDs.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.  No
# connection is made until the application starts.
app = create_app()
