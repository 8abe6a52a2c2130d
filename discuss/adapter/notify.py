"""Notifier implementations."""

import logfire

from discuss.domain.service import Notifier


class LogfireNotifier(Notifier):
    """Emits user notifications as structured log events.

    The UI shell subscribes to these events to show toasts.
    """

    def success(self, message: str) -> None:
        logfire.info("notify.success: {message}", message=message)

    def error(self, message: str) -> None:
        logfire.warn("notify.error: {message}", message=message)


class RecordingNotifier(Notifier):
    """Mock notifier that keeps every message for assertions."""

    def __init__(self) -> None:
        self.successes: list[str] = []
        self.errors: list[str] = []

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)
