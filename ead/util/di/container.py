"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ead.config import Settings
from ead.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container.

    Args:
        settings: Settings to serve; read from the environment when omitted

    Returns:
        Container with the HTTP gateway and the SQL notes store
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *providers,
        FastapiProvider(),
        context={Settings: settings or Settings()},
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Resolve ``FromDishka`` route parameters from the container.

    Args:
        app: FastAPI application
        container: DI container; closed when the app shuts down
    """
    setup_dishka(container, app)
