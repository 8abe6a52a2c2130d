"""Local session state."""

from typing import Optional

import logfire

from discuss.domain.model import Viewer
from discuss.domain.repository import SessionProvider


class LocalSession(SessionProvider):
    """Holds the viewer and token written by the authentication subsystem.

    Sign-in and sign-out happen elsewhere; they call ``sign_in`` and
    ``sign_out`` here. Everything in the discussion core reads the session
    at call time, so a change applies to the next render or request.
    """

    def __init__(
        self, viewer: Optional[Viewer] = None, token: Optional[str] = None
    ) -> None:
        self._viewer = viewer
        self._token = token

    def current_viewer(self) -> Optional[Viewer]:
        return self._viewer

    def access_token(self) -> Optional[str]:
        return self._token

    def sign_in(self, viewer: Viewer, token: Optional[str] = None) -> None:
        self._viewer = viewer
        self._token = token
        logfire.info(
            "Session started", user_id=viewer.user_id, role=viewer.role.value
        )

    def sign_out(self) -> None:
        self._viewer = None
        self._token = None
        logfire.info("Session ended")
