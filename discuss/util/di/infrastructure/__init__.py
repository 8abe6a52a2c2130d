"""Infrastructure providers."""

# Import bases
from .notifications import NotificationsProvider
from .remote import RemoteProvider

# Import implementations (needed for __subclasses__())
from .notifications import ProdNotificationsProvider  # noqa: F401
from .remote import ProdRemoteProvider  # noqa: F401

__all__ = [
    "NotificationsProvider",
    "ProdNotificationsProvider",
    "ProdRemoteProvider",
    "RemoteProvider",
]
