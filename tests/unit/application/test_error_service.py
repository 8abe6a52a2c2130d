"""Unit tests for ErrorService."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from discuss.adapter.error import NetworkError, RemoteError
from discuss.application.error_service import (
    AppError,
    ErrorService,
    ErrorSeverity,
    ErrorType,
)
from discuss.domain.error import MutationInFlightError, ValidationError
from discuss.domain.value import CommentBody


class TestNormalize:
    """Tests for failure classification."""

    def setup_method(self):
        self.service = ErrorService()

    def test_backend_message_takes_priority_over_status(self):
        error = self.service.normalize(RemoteError(400, "Token not found"))

        assert error.type == ErrorType.AUTH
        assert error.severity == ErrorSeverity.HIGH
        assert error.status_code == 400
        assert error.details == "Token not found"

    @pytest.mark.parametrize(
        "status,error_type,severity",
        [
            (400, ErrorType.VALIDATION, ErrorSeverity.LOW),
            (401, ErrorType.VALIDATION, ErrorSeverity.LOW),
            (403, ErrorType.AUTH, ErrorSeverity.HIGH),
            (404, ErrorType.VALIDATION, ErrorSeverity.LOW),
            (422, ErrorType.VALIDATION, ErrorSeverity.LOW),
            (429, ErrorType.VALIDATION, ErrorSeverity.MEDIUM),
            (500, ErrorType.SERVER, ErrorSeverity.CRITICAL),
            (502, ErrorType.SERVER, ErrorSeverity.HIGH),
            (503, ErrorType.SERVER, ErrorSeverity.HIGH),
        ],
    )
    def test_status_code_map(self, status, error_type, severity):
        error = self.service.normalize(RemoteError(status, "something odd"))

        assert error.type == error_type
        assert error.severity == severity

    def test_unmapped_status(self):
        error = self.service.normalize(RemoteError(418, "I'm a teapot"))

        assert error.type == ErrorType.UNKNOWN
        assert error.message == "I'm a teapot"

    def test_network_error(self):
        error = self.service.normalize(NetworkError("connection refused"))

        assert error.type == ErrorType.NETWORK
        assert error.severity == ErrorSeverity.MEDIUM

    def test_domain_validation_error(self):
        error = self.service.normalize(ValidationError("body", "too short"))

        assert error.type == ErrorType.VALIDATION
        assert "too short" in error.message

    def test_pydantic_validation_error(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            CommentBody("x")

        error = self.service.normalize(exc_info.value)

        assert error.type == ErrorType.VALIDATION
        assert "at least 3" in error.message

    def test_mutation_in_flight_is_client_error(self):
        error = self.service.normalize(MutationInFlightError("Posting a comment"))

        assert error.type == ErrorType.CLIENT
        assert error.severity == ErrorSeverity.LOW

    def test_generic_exception(self):
        error = self.service.normalize(RuntimeError("boom"))

        assert error.type == ErrorType.CLIENT
        assert error.message == "boom"
        assert error.details == "RuntimeError"

    def test_non_exception_value(self):
        error = self.service.normalize("weird")

        assert error.type == ErrorType.UNKNOWN

    def test_app_error_passes_through(self):
        original = AppError(
            type=ErrorType.AUTH, severity=ErrorSeverity.HIGH, message="x"
        )

        assert self.service.normalize(original) is original


class TestPolicies:
    """Tests for show/throw/retry policies."""

    def setup_method(self):
        self.service = ErrorService()

    def _error(self, error_type, severity):
        return AppError(type=error_type, severity=severity, message="m")

    @pytest.mark.parametrize(
        "error_type,severity,expected",
        [
            (ErrorType.AUTH, ErrorSeverity.HIGH, True),
            (ErrorType.VALIDATION, ErrorSeverity.LOW, True),
            (ErrorType.NETWORK, ErrorSeverity.MEDIUM, True),
            (ErrorType.SERVER, ErrorSeverity.CRITICAL, True),
            (ErrorType.SERVER, ErrorSeverity.HIGH, False),
            (ErrorType.CLIENT, ErrorSeverity.MEDIUM, False),
        ],
    )
    def test_should_show_to_user(self, error_type, severity, expected):
        error = self._error(error_type, severity)

        assert self.service.should_show_to_user(error) is expected

    @pytest.mark.parametrize(
        "error_type,severity,expected",
        [
            (ErrorType.SERVER, ErrorSeverity.HIGH, True),
            (ErrorType.CLIENT, ErrorSeverity.CRITICAL, True),
            (ErrorType.VALIDATION, ErrorSeverity.LOW, False),
            (ErrorType.NETWORK, ErrorSeverity.MEDIUM, False),
        ],
    )
    def test_should_throw_to_boundary(self, error_type, severity, expected):
        error = self._error(error_type, severity)

        assert self.service.should_throw_to_boundary(error) is expected

    @pytest.mark.parametrize(
        "error,expected",
        [
            (NetworkError("down"), True),
            (RemoteError(500), True),
            (RemoteError(503), True),
            (RemoteError(429), True),
            (RemoteError(401), False),
            (RemoteError(403), False),
            (RemoteError(404), False),
            (RemoteError(400), False),
            (ValueError("x"), False),
        ],
    )
    def test_is_retryable_read(self, error, expected):
        assert self.service.is_retryable_read(error) is expected
