"""Update comment use case."""

import logfire
from pydantic import BaseModel

from discuss.application.error_service import ErrorService
from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import MutationUseCase, parse_body
from discuss.domain.model import Comment
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.service import Notifier
from discuss.domain.value import CommentId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: CommentId
    body: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: Comment


class UpdateCommentUseCase(MutationUseCase):
    """Use case for editing the body of a comment."""

    operation = "Saving the comment"

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

    async def run(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        The returned comment is written straight into the detail view; list
        views of its content item are invalidated and refetch on next read.
        """
        body = parse_body(request.body)

        with logfire.span("update_comment.execute", comment_id=request.comment_id):
            comment = await self.comment_source.update_comment(request.comment_id, body)
            self.cache.set(CommentKeys.detail(comment.id), comment)
            self.cache.invalidate(CommentKeys.item(comment.content_item_id))

        self.notifier.success("Comment updated")
        return UpdateCommentResponse(comment=comment)
