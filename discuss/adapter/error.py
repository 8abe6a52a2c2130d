"""Adapter layer errors."""

from typing import Any, Optional


class AdapterError(Exception):
    """Base adapter error."""

    pass


class RemoteError(AdapterError):
    """The remote API answered with an error status.

    Attributes:
        status_code: HTTP status of the response
        message: Backend error message (``error`` or ``message`` field)
        payload: Decoded response body, when it was JSON
    """

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        payload: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.payload = payload
        super().__init__(f"Remote error {status_code}: {message or 'no message'}")


class NetworkError(AdapterError):
    """The request never got a response (connection refused, timeout, ...)."""

    pass


NEVER_RETRY_STATUSES = frozenset({401, 403, 404})


def is_transient(error: Exception) -> bool:
    """Whether a failed read is worth attempting again.

    Network failures and 5xx/429 responses are transient. Auth and
    not-found responses never are, and neither is any other 4xx.
    """
    if isinstance(error, NetworkError):
        return True
    if isinstance(error, RemoteError):
        if error.status_code in NEVER_RETRY_STATUSES:
            return False
        return error.status_code >= 500 or error.status_code == 429
    return False
