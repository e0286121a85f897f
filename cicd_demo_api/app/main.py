"""
Main entrypoint for the CI/CD Demo API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory store and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn cicd_demo_api.app.main:app --reload

Tests call ``create_app`` directly with their own settings and store
so that every test works on isolated data.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .api.router import api_router, system_router
from .core.config import Settings, get_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InMemoryStore, seed_demo_data
from .services.system_service import SystemService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[InMemoryStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Read from the environment when omitted.
    store : Optional[InMemoryStore]
        Store to serve.  When omitted a new store is created and, if
        ``settings.seed_demo_data`` is set, filled with the demo users
        and posts.  A store passed in is used as is.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = InMemoryStore()
        if settings.seed_demo_data:
            seed_demo_data(store)

    app = FastAPI(title=settings.project_name, version=settings.app_version)
    app.state.settings = settings
    app.state.store = store
    app.state.system_service = SystemService(store, settings)

    register_exception_handlers(app, development=settings.is_development)

    app.include_router(system_router)
    app.include_router(api_router, prefix="/api")
    _mount_front_end(app, Path(settings.static_dir))

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("CI/CD Demo App running on port %s", settings.port)
        logger.info("Environment: %s", settings.environment)
        logger.info("Version: %s", settings.app_version)
        logger.info("Health Check: http://localhost:%s/health", settings.port)
        logger.info("Metrics: http://localhost:%s/metrics", settings.port)

    return app


def _mount_front_end(app: FastAPI, static_dir: Path) -> None:
    """Serve ``index.html`` at ``/`` and the rest of ``static_dir`` under ``/static``."""
    if not static_dir.is_dir():
        logger.warning("Static directory %s not found; front end disabled", static_dir)
        return
    index = static_dir / "index.html"

    @app.get("/", include_in_schema=False)
    async def index_page() -> FileResponse:
        return FileResponse(index, media_type="text/html")

    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
