"""Session provider interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model import Viewer


class SessionProvider(ABC):
    """Read-only view of the authentication session.

    Authentication itself lives outside the discussion core. This port only
    answers who is looking and which token to send.
    """

    @abstractmethod
    def current_viewer(self) -> Optional[Viewer]:
        """The signed-in viewer, or None for anonymous visitors."""
        pass

    @abstractmethod
    def access_token(self) -> Optional[str]:
        """Bearer token for remote calls, or None."""
        pass
