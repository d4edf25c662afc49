"""Entry point for the AI Tools API.

Starts the FastAPI application with Uvicorn.  The listening port is
taken from the ``PORT`` environment variable (default ``3000``) and the
bind address from ``HOST`` (default ``0.0.0.0``).  Other settings such
as ``LOG_LEVEL`` and ``CORS_ALLOW_ORIGINS`` are described in
``ai_tools_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from ai_tools_api.app.core.config import settings
from ai_tools_api.app.core.logging_config import resolve_level
from ai_tools_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=resolve_level(settings.log_level),
        # Logging is configured by create_app; uvicorn loggers propagate to it.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
