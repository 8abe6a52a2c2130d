"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.application.error_service import ErrorService
from discuss.config import ThreadSettings
from discuss.domain.service import PermissionService, ThreadService
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are stateless, so one instance serves the whole client.
    """

    scope = Scope.APP

    @provide
    def get_permission_service(self, settings: ThreadSettings) -> PermissionService:
        """Provide permission service bounded by the configured reply depth."""
        return PermissionService(max_depth=settings.max_depth)

    @provide
    def get_thread_service(
        self, permission_service: PermissionService
    ) -> ThreadService:
        """Provide comment tree assembly service."""
        return ThreadService(permission_service=permission_service)

    @provide
    def get_error_service(self) -> ErrorService:
        """Provide error classification service."""
        return ErrorService()
