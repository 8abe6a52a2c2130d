"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from discuss.config import CacheSettings, Settings, ThreadSettings, TransportSettings
from discuss.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide client settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        return settings.cache

    @provide(scope=Scope.APP)
    def provide_thread_settings(self, settings: Settings) -> ThreadSettings:
        return settings.threads

    @provide(scope=Scope.APP)
    def provide_transport_settings(self, settings: Settings) -> TransportSettings:
        return settings.transport
