"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from shared.database import Database
from modules.users.routes import router as users_router

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .middleware.auth import require_auth
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the connection pool if the runner did not already do so, and
    closes it on shutdown. A database that cannot be reached aborts
    startup before the server starts listening.
    """
    container: ServiceContainer = app.state.container
    # Startup
    if not container.has_database:
        container.open_database()
        logger.info("Database connection successful")
    logger.info(
        "Starting %s on %s:%s",
        container.settings.app_name,
        container.settings.host,
        container.settings.port,
    )
    yield
    # Shutdown
    logger.info("Shutting down, closing database pool")
    container.close()


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    auth_router: Optional[APIRouter] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; loaded from the environment when omitted
        database: An already opened connection pool, if any
        auth_router: External router to mount under /api/auth

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Users resource backed by PostgreSQL, guarded by bearer tokens",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.container = ServiceContainer(settings, database=database)

    # Cross-origin requests are permitted unconditionally
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    users_dependencies = [Depends(require_auth)] if settings.require_auth else []
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(
        users_router,
        prefix="/api/users",
        tags=["users"],
        dependencies=users_dependencies,
    )
    if auth_router is not None:
        app.include_router(auth_router, prefix="/api/auth", tags=["auth"])

    return app


# Application instance for uvicorn
app = create_app()
