"""Error classification.

Every failure reaching the application layer is normalized into an
``AppError`` with a type and a severity. Three independent policies read
that classification: whether to show it to the user, whether to escalate
it to the top-level fallback view, and whether a read may be retried.
"""

from enum import Enum
from typing import Optional

import logfire
from pydantic import BaseModel, ValidationError as PydanticValidationError

from discuss.adapter.error import NetworkError, RemoteError, is_transient
from discuss.domain.error import (
    MutationInFlightError,
    ValidationError,
)


class ErrorType(str, Enum):
    """Broad category of a failure."""

    NETWORK = "network"
    AUTH = "auth"
    VALIDATION = "validation"
    SERVER = "server"
    CLIENT = "client"
    UNKNOWN = "unknown"


class ErrorSeverity(str, Enum):
    """How serious a failure is for the current view."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppError(BaseModel):
    """Normalized failure."""

    type: ErrorType
    severity: ErrorSeverity
    message: str  # User-facing
    details: Optional[str] = None  # Technical detail, for logs
    status_code: Optional[int] = None


class _Mapping(BaseModel):
    type: ErrorType
    severity: ErrorSeverity
    message: str


SESSION_EXPIRED = "Your session has expired. Please sign in again"
FORBIDDEN = "You are not allowed to do this"

# Backend error messages take priority over status codes
BACKEND_MESSAGE_MAP: dict[str, _Mapping] = {
    "Token not found": _Mapping(
        type=ErrorType.AUTH, severity=ErrorSeverity.HIGH, message=SESSION_EXPIRED
    ),
    "Invalid token": _Mapping(
        type=ErrorType.AUTH, severity=ErrorSeverity.HIGH, message=SESSION_EXPIRED
    ),
    "Not authorized for this action": _Mapping(
        type=ErrorType.AUTH, severity=ErrorSeverity.HIGH, message=FORBIDDEN
    ),
    "Invalid data format": _Mapping(
        type=ErrorType.VALIDATION,
        severity=ErrorSeverity.LOW,
        message="The submitted data is invalid",
    ),
    "Resource not found": _Mapping(
        type=ErrorType.VALIDATION,
        severity=ErrorSeverity.LOW,
        message="The requested item was not found",
    ),
    "Server error": _Mapping(
        type=ErrorType.SERVER,
        severity=ErrorSeverity.HIGH,
        message="Something went wrong on the server. Please try again later",
    ),
}

STATUS_CODE_MAP: dict[int, _Mapping] = {
    400: _Mapping(
        type=ErrorType.VALIDATION, severity=ErrorSeverity.LOW, message="Invalid request"
    ),
    401: _Mapping(
        type=ErrorType.VALIDATION,
        severity=ErrorSeverity.LOW,
        message="Invalid credentials",
    ),
    403: _Mapping(type=ErrorType.AUTH, severity=ErrorSeverity.HIGH, message=FORBIDDEN),
    404: _Mapping(
        type=ErrorType.VALIDATION,
        severity=ErrorSeverity.LOW,
        message="The requested item was not found",
    ),
    422: _Mapping(
        type=ErrorType.VALIDATION,
        severity=ErrorSeverity.LOW,
        message="The submitted data is invalid",
    ),
    429: _Mapping(
        type=ErrorType.VALIDATION,
        severity=ErrorSeverity.MEDIUM,
        message="Too many requests. Please wait a moment",
    ),
    500: _Mapping(
        type=ErrorType.SERVER,
        severity=ErrorSeverity.CRITICAL,
        message="Something went wrong on the server",
    ),
    502: _Mapping(
        type=ErrorType.SERVER,
        severity=ErrorSeverity.HIGH,
        message="The server is temporarily unavailable",
    ),
    503: _Mapping(
        type=ErrorType.SERVER,
        severity=ErrorSeverity.HIGH,
        message="The service is temporarily unavailable",
    ),
}


class ErrorService:
    """Classifies failures and answers the show/throw/retry policies."""

    def normalize(self, error: object) -> AppError:
        """Normalize any raised object into an ``AppError``.

        Args:
            error: The failure (usually an exception)

        Returns:
            Classified error with a user-facing message
        """
        if isinstance(error, AppError):
            return error

        if isinstance(error, RemoteError):
            return self._normalize_remote(error)

        if isinstance(error, NetworkError):
            return AppError(
                type=ErrorType.NETWORK,
                severity=ErrorSeverity.MEDIUM,
                message="Check your internet connection",
                details=str(error),
            )

        if isinstance(error, ValidationError):
            return AppError(
                type=ErrorType.VALIDATION,
                severity=ErrorSeverity.LOW,
                message=str(error),
            )

        if isinstance(error, PydanticValidationError):
            first = error.errors()[0] if error.error_count() else {}
            return AppError(
                type=ErrorType.VALIDATION,
                severity=ErrorSeverity.LOW,
                message=str(first.get("msg", "The submitted data is invalid")),
                details=str(error),
            )

    def _normalize_remote(self, error: RemoteError) -> AppError:
        if error.message and error.message in BACKEND_MESSAGE_MAP:
            mapping = BACKEND_MESSAGE_MAP[error.message]
        elif error.status_code in STATUS_CODE_MAP:
            mapping = STATUS_CODE_MAP[error.status_code]
        else:
            return AppError(
                type=ErrorType.UNKNOWN,
                severity=ErrorSeverity.MEDIUM,
                message=error.message or "Something went wrong",
                details=error.message,
                status_code=error.status_code,
            )
        return AppError(
            type=mapping.type,
            severity=mapping.severity,
            message=mapping.message,
            details=error.message,
            status_code=error.status_code,
        )

    def should_show_to_user(self, error: AppError) -> bool:
        """Auth, validation, network and critical errors are shown."""
        if error.severity == ErrorSeverity.CRITICAL:
            return True
        return error.type in (ErrorType.AUTH, ErrorType.VALIDATION, ErrorType.NETWORK)

    def should_throw_to_boundary(self, error: AppError) -> bool:
        """Server and critical errors are unrecoverable for the current view."""
        return error.severity == ErrorSeverity.CRITICAL or error.type == ErrorType.SERVER

    def is_retryable_read(self, error: Exception) -> bool:
        """Whether a failed read may be retried by the transport."""
        return is_transient(error)

    def user_message(self, error: AppError) -> str:
        return error.message or "Something went wrong"

    def log_error(self, error: AppError) -> None:
        """Record a normalized error."""
        log = logfire.error if self.should_throw_to_boundary(error) else logfire.warn
        log(
            "{type} error: {message}",
            type=error.type.value,
            message=error.message,
            severity=error.severity.value,
            details=error.details,
            status_code=error.status_code,
        )
