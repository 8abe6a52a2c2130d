"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.error_service import ErrorService
from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentStatisticsUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    ModerateCommentsUseCase,
    UpdateCommentUseCase,
)
from discuss.config import CacheSettings
from discuss.domain.repository import CommentSource, QueryCache
from discuss.domain.service import Notifier
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped: each UI control opens its own scope, so
    every control owns its use case instance and its pending guard.
    """

    # Read use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        cache_settings: CacheSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_source=comment_source,
            cache=cache,
            cache_settings=cache_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        cache_settings: CacheSettings,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_source=comment_source,
            cache=cache,
            cache_settings=cache_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_statistics_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        cache_settings: CacheSettings,
    ) -> GetCommentStatisticsUseCase:
        """Provide comment statistics use case."""
        return GetCommentStatisticsUseCase(
            comment_source=comment_source,
            cache=cache,
            cache_settings=cache_settings,
        )

    # Mutation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        notifier: Notifier,
        error_service: ErrorService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_source=comment_source,
            cache=cache,
            notifier=notifier,
            error_service=error_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        notifier: Notifier,
        error_service: ErrorService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_source=comment_source,
            cache=cache,
            notifier=notifier,
            error_service=error_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        notifier: Notifier,
        error_service: ErrorService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_source=comment_source,
            cache=cache,
            notifier=notifier,
            error_service=error_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_comments_use_case(
        self,
        comment_source: CommentSource,
        cache: QueryCache,
        notifier: Notifier,
        error_service: ErrorService,
    ) -> ModerateCommentsUseCase:
        """Provide bulk moderation use case."""
        return ModerateCommentsUseCase(
            comment_source=comment_source,
            cache=cache,
            notifier=notifier,
            error_service=error_service,
        )
