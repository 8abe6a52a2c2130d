"""Base use cases."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from discuss.application.error_service import ErrorService
from discuss.domain.error import MutationInFlightError, ValidationError
from discuss.domain.service import Notifier
from discuss.domain.value import CommentBody


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class MutationUseCase(BaseUseCase):
    """Base for write operations issued from one UI control.

    Each instance belongs to a single control and tracks whether its
    last request has settled. Failures are normalized, reported through
    the notifier and re-raised to the caller.
    """

    operation: str = "Mutation"

    def __init__(self, notifier: Notifier, error_service: ErrorService) -> None:
        self.notifier = notifier
        self.error_service = error_service
        self._pending = False

    @property
    def is_pending(self) -> bool:
        """Whether a request from this control is still in flight."""
        return self._pending

    async def execute(self, request: Any) -> Any:
        """Run the mutation unless one is already in flight.

        Raises:
            MutationInFlightError: If the previous request has not settled
        """
        if self._pending:
            raise MutationInFlightError(self.operation)

        self._pending = True
        try:
            return await self.run(request)
        except Exception as e:
            app_error = self.error_service.normalize(e)
            self.error_service.log_error(app_error)
            self.notifier.error(self.error_service.user_message(app_error))
            raise
        finally:
            self._pending = False

    @abstractmethod
    async def run(self, request: Any) -> Any:
        pass


def parse_body(text: str) -> CommentBody:
    """Validate submitted comment text.

    Raises:
        ValidationError: If the text is too short or too long
    """
    try:
        return CommentBody(text)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError("body", message) from e
