"""List comments use case."""

import logfire
from pydantic import BaseModel

from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import BaseUseCase
from discuss.config import CacheSettings
from discuss.domain.model import CommentPage
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.value import CommentQuery, ContentItemId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    content_item_id: ContentItemId
    query: CommentQuery = CommentQuery()


class ListCommentsResponse(BaseModel):
    """List comments response."""

    page: CommentPage


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading one page of a content item's comment tree."""

    def __init__(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        cache_settings: CacheSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_source: Remote comment source
            cache: Shared query cache
            cache_settings: Stale times per view
        """
        self.comment_source = comment_source
        self.cache = cache
        self.cache_settings = cache_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Read the page through the cache.

        A fresh cached page is returned as-is; a stale or missing one is
        fetched, and concurrent reads of the same page share that fetch.

        Args:
            request: Content item and query

        Returns:
            The page, including any optimistic entries spliced into it
        """
        key = CommentKeys.item_query(request.content_item_id, request.query)
        with logfire.span(
            "list_comments.execute",
            content_item_id=request.content_item_id,
            page=request.query.page,
        ):
            page = await self.cache.fetch(
                key,
                lambda: self.comment_source.list_comments(
                    request.content_item_id, request.query
                ),
                stale_after=self.cache_settings.list_stale_seconds,
            )
        return ListCommentsResponse(page=page)
