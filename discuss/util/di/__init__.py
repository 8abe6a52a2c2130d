"""Dependency injection module."""

from typing import Type

from discuss.util.di.application import ProdApplicationProvider
from discuss.util.di.base import Component, ProviderBase
from discuss.util.di.core import ProdConfigProvider
from discuss.util.di.domain import ProdDomainProvider
from discuss.util.di.infrastructure import (
    NotificationsProvider,
    ProdNotificationsProvider,
    ProdRemoteProvider,
    RemoteProvider,
)
from discuss.util.di.state import ClientStateProvider

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ClientStateProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    RemoteProvider,
    NotificationsProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    A base without subclasses is concrete and returned as is. Otherwise
    the subclass whose ``__is_mock__`` matches ``use_mock`` is chosen.

    Raises:
        ValueError: If no subclass of the requested kind exists
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ClientStateProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "NotificationsProvider",
    "RemoteProvider",
    # Infrastructure implementations
    "ProdNotificationsProvider",
    "ProdRemoteProvider",
]
