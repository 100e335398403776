"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_config import configure_logging
from .errors import setup_exception_handlers
from .routes import health, users
from modules.access.routes import router as access_router
from modules.auth.routes import router as auth_router
from modules.chat.routes import router as chat_router
from modules.profiles.routes import router as profiles_router
from modules.space_requests.routes import router as space_requests_router
from modules.spaces.routes import router as spaces_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting %s on %s:%s (access tokens %s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.access_token_policy,
    )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Marketplace connecting landowners with gardeners",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    setup_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(profiles_router, prefix="/api/profiles", tags=["profiles"])
    app.include_router(spaces_router, prefix="/api/spaces", tags=["spaces"])
    app.include_router(space_requests_router, prefix="/api/space-requests", tags=["space-requests"])
    app.include_router(chat_router, prefix="/api/chat", tags=["chat"])
    app.include_router(access_router, prefix="/api/access", tags=["access"])

    return app


# Application instance for uvicorn
app = create_app()
