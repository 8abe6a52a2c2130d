"""Get comment statistics use case."""

import logfire
from pydantic import BaseModel

from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.base import BaseUseCase
from discuss.config import CacheSettings
from discuss.domain.model import CommentStatistics
from discuss.domain.repository import CommentSource, QueryCache


class GetCommentStatisticsRequest(BaseModel):
    """Get comment statistics request (no parameters)."""


class GetCommentStatisticsResponse(BaseModel):
    """Get comment statistics response."""

    statistics: CommentStatistics


class GetCommentStatisticsUseCase(BaseUseCase):
    """Use case for the moderation dashboard counters."""

    def __init__(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        cache_settings: CacheSettings,
    ) -> None:
        self.comment_source = comment_source
        self.cache = cache
        self.cache_settings = cache_settings

    async def execute(
        self, request: GetCommentStatisticsRequest
    ) -> GetCommentStatisticsResponse:
        with logfire.span("get_comment_statistics.execute"):
            statistics = await self.cache.fetch(
                CommentKeys.statistics(),
                self.comment_source.get_statistics,
                stale_after=self.cache_settings.statistics_stale_seconds,
            )
        return GetCommentStatisticsResponse(statistics=statistics)
