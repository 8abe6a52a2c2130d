"""Bulk moderation use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from discuss.application.error_service import ErrorService
from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import MutationUseCase
from discuss.domain.model import ModerationResult
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.service import Notifier
from discuss.domain.value import CommentId, ModerationAction


class ModerateCommentsRequest(BaseModel):
    """Bulk moderation request."""

    comment_ids: list[CommentId] = Field(min_length=1)
    action: ModerationAction
    reason: Optional[str] = None


class ModerateCommentsResponse(BaseModel):
    """Bulk moderation response."""

    result: ModerationResult


class ModerateCommentsUseCase(MutationUseCase):
    """Use case for deleting or restoring many comments at once.

    Partial failure is a normal outcome: the request succeeds and the
    result reports which items failed and why.
    """

    operation = "Moderation"

    def __init__(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        notifier: Notifier,
        error_service: ErrorService,
    ) -> None:
        super().__init__(notifier=notifier, error_service=error_service)
        self.comment_source = comment_source
        self.cache = cache

    async def run(self, request: ModerateCommentsRequest) -> ModerateCommentsResponse:
        """Execute bulk moderation.

        Returns:
            Aggregate result with per-item failures
        """
        with logfire.span(
            "moderate_comments.execute",
            action=request.action.value,
            count=len(request.comment_ids),
        ):
            result = await self.comment_source.moderate_comments(
                request.comment_ids, request.action, request.reason
            )
            self.cache.invalidate(CommentKeys.all())

            if result.failed_items:
                logfire.warn(
                    "Moderation partially failed",
                    failed=[item.id for item in result.failed_items],
                )

        self.notifier.success(
            f"Moderation complete: {result.success_count} succeeded, "
            f"{result.failed_count} failed"
        )
        return ModerateCommentsResponse(result=result)
