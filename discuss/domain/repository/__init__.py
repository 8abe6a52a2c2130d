"""Port interfaces for the discussion domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter and persistence layers.
"""

from discuss.domain.repository.cache import Listener, QueryCache, QueryKey
from discuss.domain.repository.comment import CommentSource
from discuss.domain.repository.session import SessionProvider

__all__ = [
    "CommentSource",
    "Listener",
    "QueryCache",
    "QueryKey",
    "SessionProvider",
]
