"""Notification surface interface."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Shows short success/failure messages after a mutation settles.

    Fire-and-forget: notifications never affect correctness.
    """

    @abstractmethod
    def success(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass
