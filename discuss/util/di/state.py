"""Client state DI providers."""

from dishka import Scope, provide

from discuss.adapter.session import LocalSession
from discuss.application.optimistic import OptimisticComments
from discuss.domain.repository import QueryCache, SessionProvider
from discuss.persistence.cache import InMemoryQueryCache
from discuss.util.di.base import ProviderBase


class ClientStateProvider(ProviderBase):
    """State shared by every view of one client session - concrete.

    The cache and the session live for the whole container so that a
    write issued from one view is seen by every other view.
    """

    scope = Scope.APP

    @provide
    def get_query_cache(self) -> QueryCache:
        """Provide the shared query cache."""
        return InMemoryQueryCache()

    @provide
    def get_local_session(self) -> LocalSession:
        """Provide session state written by the authentication subsystem."""
        return LocalSession()

    @provide
    def get_session_provider(self, session: LocalSession) -> SessionProvider:
        return session

    @provide
    def get_optimistic_comments(
        self, cache: QueryCache, session: SessionProvider
    ) -> OptimisticComments:
        """Provide the optimistic entry helper."""
        return OptimisticComments(cache=cache, session=session)
