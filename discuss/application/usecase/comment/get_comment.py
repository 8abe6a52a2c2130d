"""Get comment use case."""

import logfire
from pydantic import BaseModel

from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import BaseUseCase
from discuss.config import CacheSettings
from discuss.domain.model import Comment
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: CommentId


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: Comment


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single comment with its replies."""

    def __init__(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        cache_settings: CacheSettings,
    ) -> None:
        self.comment_source = comment_source
        self.cache = cache
        self.cache_settings = cache_settings

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Read the comment through the cache."""
        with logfire.span("get_comment.execute", comment_id=request.comment_id):
            comment = await self.cache.fetch(
                CommentKeys.detail(request.comment_id),
                lambda: self.comment_source.get_comment(request.comment_id),
                stale_after=self.cache_settings.detail_stale_seconds,
            )
        return GetCommentResponse(comment=comment)
