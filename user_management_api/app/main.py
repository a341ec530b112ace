"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory store and the user service, installs the JSON
exception handlers and includes the versioned routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app`` so it can be served with uvicorn, e.g.::

    uvicorn user_management_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import InMemoryUserStore
from .api.v1.router import router as v1_router
from .services.user_service import UserService


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryUserStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    store : Optional[InMemoryUserStore]
        Store backing the user service.  A new empty store is created
        when omitted, so every app starts with no users.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The user service is
        available as ``app.state.user_service``.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.user_service = UserService(store if store is not None else InMemoryUserStore())

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
