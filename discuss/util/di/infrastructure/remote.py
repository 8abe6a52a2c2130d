"""Remote comment source providers."""

from dishka import Scope, provide

from discuss.adapter.http import HttpCommentSource
from discuss.config import Settings
from discuss.domain.repository import CommentSource, SessionProvider
from discuss.util.di.base import ProviderBase
from discuss.util.error import ConfigurationError
from discuss.util.observability import instrument_httpx


class RemoteProvider(ProviderBase):
    """Remote component base."""

    __mock_component__ = "remote"


class ProdRemoteProvider(RemoteProvider):
    """Production remote provider talking to the REST API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_comment_source(
        self, settings: Settings, session: SessionProvider
    ) -> CommentSource:
        """Provide HTTP comment source.

        Raises:
            ConfigurationError: If the API base URL is not configured
        """
        if not settings.api.base_url:
            raise ConfigurationError("API base URL must be configured")

        # Trace outgoing API calls
        instrument_httpx()
        return HttpCommentSource(
            base_url=settings.api.base_url,
            session=session,
            timeout=settings.transport.timeout_seconds,
            max_read_retries=settings.transport.max_read_retries,
        )
