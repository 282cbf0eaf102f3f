"""Observability configuration using Logfire.

Domain services log through logfire directly:

    import logfire

    with logfire.span("moderation_service.load_full_thread", comment_id=cid):
        logfire.info("Full thread stored", parent_id=cid, count=12)

The helpers here configure the SDK once at startup and instrument the
libraries the service talks through (FastAPI, httpx, SQLAlchemy).
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ead.config import Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Resolve whether telemetry leaves the process.

    An explicit setting wins; otherwise a configured token enables sending.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the environment.

    Without a token the output stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    config_kwargs = {
        "service_name": "ead-comments",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        backend=settings.backend.base_url,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request served by the API.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries against the notes store.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound calls to the EAD backend."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
