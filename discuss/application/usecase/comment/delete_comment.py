"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from discuss.application.error_service import ErrorService
from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import MutationUseCase
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.service import Notifier
from discuss.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: CommentId


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: CommentId


class DeleteCommentUseCase(MutationUseCase):
    """Use case for soft-deleting a comment.

    The comment becomes a tombstone; its replies stay in the thread. Any
    cached view may show it, so the whole comment namespace is invalidated.
    """

    operation = "Deleting the comment"

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

    async def run(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        with logfire.span("delete_comment.execute", comment_id=request.comment_id):
            await self.comment_source.delete_comment(request.comment_id)
            self.cache.invalidate(CommentKeys.all())

        self.notifier.success("Comment deleted")
        return DeleteCommentResponse(comment_id=request.comment_id)
