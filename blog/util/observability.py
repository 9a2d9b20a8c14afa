"""Logfire setup for the blog API.

Services and repositories log through ``logfire`` directly:

    logfire.info("Category created", category_id=category.id, slug=str(category.slug))

    with logfire.span("post_service.delete_post", post_id=post_id):
        ...

This module configures the SDK once per process and instruments FastAPI and
SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings

SERVICE_NAME = "blog-api"
SERVICE_VERSION = "0.1.0"

# Health checks would otherwise drown out real traffic
UNTRACED_URLS = "/health"


def _send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins, then token presence; console-only otherwise."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship spans to Logfire; without it
    everything is printed to the console.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes):
    """Tag request spans with the resource being addressed."""
    result = {**attributes, "method": request.method, "path": request.url.path}

    segments = [s for s in request.url.path.split("/") if s]
    if segments:
        result["resource"] = segments[0]
    if request.client:
        result["client_host"] = request.client.host

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Headers are not captured since they carry bearer tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented", url=engine.url.render_as_string())
