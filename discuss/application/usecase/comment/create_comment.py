"""Create comment use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from discuss.application.error_service import ErrorService
from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import MutationUseCase, parse_body
from discuss.domain.model import Comment
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.service import Notifier
from discuss.domain.value import CommentId, ContentItemId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content_item_id: ContentItemId
    body: str
    parent_id: Optional[CommentId] = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: Comment


class CreateCommentUseCase(MutationUseCase):
    """Use case for posting a comment or a reply to another comment."""

    operation = "Posting a comment"

    def __init__(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        notifier: Notifier,
        error_service: ErrorService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_source: Remote comment source
            cache: Shared query cache
            notifier: Toast surface
            error_service: Failure classification
        """
        super().__init__(notifier=notifier, error_service=error_service)
        self.comment_source = comment_source
        self.cache = cache

    async def run(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate the body locally
        2. Create the comment remotely
        3. Invalidate every list view of the item and the statistics

        Raises:
            ValidationError: If the body length is out of range
            RemoteError: If the server rejects the comment
        """
        body = parse_body(request.body)

        with logfire.span(
            "create_comment.execute",
            content_item_id=request.content_item_id,
            parent_id=request.parent_id,
        ):
            comment = await self.comment_source.create_comment(
                request.content_item_id, body, request.parent_id
            )
            self.cache.invalidate(CommentKeys.item(request.content_item_id))
            self.cache.invalidate(CommentKeys.statistics())

        self.notifier.success("Comment posted")
        return CreateCommentResponse(comment=comment)
