"""
Main entrypoint for the AI Tools API.

This module assembles the FastAPI application: it sets up logging,
CORS, the in‑memory storage, the API routers and the exception
handlers that turn every failure into a ``{"error": ...}`` JSON body.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn ai_tools_api.app.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import APIError
from .core.logging_config import setup_logging
from .core.storage import init_storage
from .schemas.favorite import INVALID_TOOL_ID_MESSAGE

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render a service error as ``{"error": message}``."""
    return _error(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors raised by Starlette.

    Unknown paths and known paths requested with an unsupported method
    are both reported as a missing endpoint.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error(status.HTTP_404_NOT_FOUND, "Endpoint not found")
    return _error(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request input as HTTP 400.

    The only request body the API accepts is the favorite payload, so
    any body error is reported with the ``toolId`` message.
    """
    errors = exc.errors()
    logger.warning(
        "Validation error for %s %s: %d error(s)",
        request.method,
        request.url.path,
        len(errors),
    )
    if any(error.get("loc", ())[:1] == ("body",) for error in errors):
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_TOOL_ID_MESSAGE)
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last‑resort handler; never exposes exception details to clients."""
    logger.error("Unhandled error", exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call returns an application with a freshly seeded catalog and
    an empty favorites list.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use.  Defaults to the module level ``settings``
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    # Initialise logging before anything else so the startup messages
    # below are emitted with the configured format.
    setup_logging(cfg)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        base = f"http://localhost:{cfg.port}"
        logger.info("Server running on port %s", cfg.port)
        logger.info("Health check: %s/health", base)
        logger.info("Tools API: %s/api/tools", base)
        logger.info("Favorites API: %s/api/favorites", base)
        logger.info(
            "Catalog loaded with %d tools in categories: %s",
            len(app.state.catalog),
            ", ".join(app.state.catalog.categories()),
        )
        yield

    # Trailing-slash variants are registered explicitly on each route and
    # served directly rather than redirected.
    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    init_storage(app)
    app.include_router(api_router)

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
