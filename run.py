"""Entry point for serving the Users API.

Runs the FastAPI application under Uvicorn.  Host, port, log level and
the user store backend are read from the environment through
``users_api.app.core.config`` (``HOST``, ``PORT``, ``LOG_LEVEL``,
``USER_STORE``, ``DATABASE_URL``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Serving %s with the %s user store", settings.project_name, settings.user_store
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
