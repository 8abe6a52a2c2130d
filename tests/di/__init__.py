"""Mock providers for testing."""

from .notifications import MockNotificationsProvider
from .remote import MockRemoteProvider
from .container import build_test_container

__all__ = [
    "MockNotificationsProvider",
    "MockRemoteProvider",
    "build_test_container",
]
