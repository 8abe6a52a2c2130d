"""Notification surface providers."""

from dishka import Scope, provide

from discuss.adapter.notify import LogfireNotifier
from discuss.domain.service import Notifier
from discuss.util.di.base import ProviderBase


class NotificationsProvider(ProviderBase):
    """Notifications component base."""

    __mock_component__ = "notifications"


class ProdNotificationsProvider(NotificationsProvider):
    """Production notifications emitted as logfire events."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide notifier."""
        return LogfireNotifier()
