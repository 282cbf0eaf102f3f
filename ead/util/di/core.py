"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context

from ead.config import Settings
from ead.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider.

    Settings are read once when the container is built and passed in as
    context, so the FastAPI app and every provider see the same values.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)
