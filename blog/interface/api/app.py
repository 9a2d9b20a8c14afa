"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.interface.api.routes import categories, health, posts
from blog.interface.api.routes.health import VERSION
from blog.interface.error import register_exception_handlers
from blog.util.di.container import create_container, setup_di
from blog.util.error import ConfigurationError
from blog.util.observability import instrument_fastapi

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings to use (loaded from the environment when omitted)
        container: DI container (the production container when omitted)

    Raises:
        ConfigurationError: If production runs with the placeholder JWT secret
    """
    settings = settings or Settings()

    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="Blog API",
        description="Content and taxonomy backend for the blog: categories, posts and comments",
        version=VERSION,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(posts.router)

    return app_instance
