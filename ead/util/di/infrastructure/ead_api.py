"""EAD backend API infrastructure providers."""

from dishka import Scope, provide

from ead.adapter.ead_api import HttpCommentGateway
from ead.config import Settings
from ead.domain.repository import CommentGateway
from ead.util.di.base import ProviderBase
from ead.util.error import ConfigurationError


class EadApiProvider(ProviderBase):
    """EAD backend API component base."""

    __mock_component__ = "ead_api"


class ProdEadApiProvider(EadApiProvider):
    """Production provider talking to the school backend over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_gateway(self, settings: Settings) -> CommentGateway:
        """Provide HTTP comment gateway.

        Raises:
            ConfigurationError: If the backend base URL is not configured
        """
        if not settings.backend.base_url:
            raise ConfigurationError("BACKEND__BASE_URL")

        return HttpCommentGateway(
            base_url=settings.backend.base_url,
            api_token=settings.backend.api_token,
            timeout=settings.backend.timeout,
        )
