"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging, creates
the configured user store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --reload

The application title, version and store backend are provided via
``Settings`` from ``core.config``.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.exceptions import UserNotFoundError
from .core.logging_config import setup_logging
from .api.v1.router import build_router
from .services.user_store import UserStore, build_user_store


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[UserStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    store : Optional[UserStore]
        User store to serve.  If omitted, one is built from
        ``settings.user_store``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store and
    # routers can log during setup.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    user_store = store or build_user_store(settings)
    app.state.user_store = user_store

    app.include_router(build_router(user_store), prefix=settings.api_prefix)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the SQLite schema for the persistent store; no‑op for
        # the in‑memory one.
        user_store.startup()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
