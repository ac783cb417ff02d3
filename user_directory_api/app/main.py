"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn user_directory_api.app.main:app --reload

The application title, version and route prefix are provided via
``Settings`` from ``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules
    # below can safely log messages.
    # DEBUG only raises log verbosity; 500s keep the JSON error body.
    setup_logging("DEBUG" if settings.debug else settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Start every server process from a freshly seeded store.
        init_store()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
