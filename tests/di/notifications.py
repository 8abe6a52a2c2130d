"""Mock notification providers for testing."""

from dishka import Scope, provide

from discuss.adapter.notify import RecordingNotifier
from discuss.domain.service import Notifier
from discuss.util.di.infrastructure.notifications import NotificationsProvider


class MockNotificationsProvider(NotificationsProvider):
    """Mock notifications provider recording every message."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_recording_notifier(self) -> RecordingNotifier:
        return RecordingNotifier()

    @provide(scope=Scope.APP)
    def get_notifier(self, notifier: RecordingNotifier) -> Notifier:
        """Provide recording notifier."""
        return notifier
