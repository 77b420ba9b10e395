"""FastAPI application factory for neo-blog."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from .api import register_exception_handlers
from .api.models import HealthResponse
from .config import BlogSettings, get_settings, setup_logging
from .container import BlogContainer
from .features.auth.api import router as auth_router
from .features.categories.api import router as categories_router
from .features.comments.api import router as comments_router
from .features.posts.api import router as posts_router
from .features.users.api import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    container: BlogContainer = app.state.container
    await container.startup()
    logger.info(
        f"{container.settings.app_name} {container.settings.app_version} started "
        f"({container.settings.environment}, {container.settings.storage_backend} storage)"
    )

    yield

    await container.shutdown()
    logger.info(f"{container.settings.app_name} stopped")


def create_app(
    settings: Optional[BlogSettings] = None,
    container: Optional[BlogContainer] = None,
) -> FastAPI:
    """Create the neo-blog API.

    Args:
        settings: Overrides the environment-derived settings
        container: Prebuilt collaborators; built from ``settings`` when omitted

    Raises:
        ConfigurationError: If the settings are unsafe for the environment
    """
    settings = settings or (container.settings if container else get_settings())
    setup_logging(settings.log_level, settings.log_format)
    settings.validate_for_runtime()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Blogging backend: users, posts, categories, comments and replies",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container or BlogContainer(settings)

    register_exception_handlers(app, is_production=settings.is_production)

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(categories_router)
    app.include_router(posts_router)
    app.include_router(comments_router)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health(request: Request) -> HealthResponse:
        current = request.app.state.container.settings
        return HealthResponse(
            status="ok",
            app=current.app_name,
            version=current.app_version,
            storage_backend=current.storage_backend,
        )

    logger.info(f"Created {settings.app_name} API")
    return app
