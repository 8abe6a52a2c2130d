"""Comments section of a content item page."""

from collections.abc import Callable
from typing import Optional

from dishka import AsyncContainer
import logfire

from discuss.application.error_service import AppError, ErrorService
from discuss.application.optimistic import OptimisticComments
from discuss.application.query_keys import CommentKeys
from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from discuss.domain.model import Comment, CommentPage
from discuss.domain.repository import QueryCache, QueryKey, SessionProvider
from discuss.domain.service import CommentNode, ThreadService
from discuss.domain.value import (
    CommentId,
    CommentQuery,
    ContentItemId,
    SortField,
    SortOrder,
)
from discuss.interface.view.ui_state import ThreadUIState


class CommentsSection:
    """Paged, sortable comment thread for one content item.

    Holds the current query and the last loaded page. Changing the sort
    resets to page 1. ``load_more`` moves to the next page while one
    exists and shows that page in place of the current one.

    The section re-reads from the cache after its own writes and, once
    mounted, whenever another view invalidates one of its entries.
    """

    def __init__(
        self,
        content_item_id: ContentItemId,
        list_comments: ListCommentsUseCase,
        create_comment: CreateCommentUseCase,
        update_comment: UpdateCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        thread_service: ThreadService,
        error_service: ErrorService,
        session: SessionProvider,
        cache: QueryCache,
        optimistic: Optional[OptimisticComments] = None,
        query: Optional[CommentQuery] = None,
    ) -> None:
        self.content_item_id = content_item_id
        self.list_comments = list_comments
        self.create_comment = create_comment
        self.update_comment = update_comment
        self.delete_comment = delete_comment
        self.thread_service = thread_service
        self.error_service = error_service
        self.session = session
        self.cache = cache
        self.optimistic = optimistic
        self.query = query or CommentQuery()
        self.ui_state = ThreadUIState()
        self.page: Optional[CommentPage] = None
        self.error: Optional[AppError] = None
        self.needs_refresh = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    @classmethod
    async def from_container(
        cls,
        container: AsyncContainer,
        content_item_id: ContentItemId,
        query: Optional[CommentQuery] = None,
    ) -> "CommentsSection":
        """Build a section from a request-scoped container."""
        return cls(
            content_item_id=content_item_id,
            list_comments=await container.get(ListCommentsUseCase),
            create_comment=await container.get(CreateCommentUseCase),
            update_comment=await container.get(UpdateCommentUseCase),
            delete_comment=await container.get(DeleteCommentUseCase),
            thread_service=await container.get(ThreadService),
            error_service=await container.get(ErrorService),
            session=await container.get(SessionProvider),
            cache=await container.get(QueryCache),
            optimistic=await container.get(OptimisticComments),
            query=query,
        )

    @property
    def key(self) -> QueryKey:
        return CommentKeys.item_query(self.content_item_id, self.query)

    @property
    def is_loaded(self) -> bool:
        return self.page is not None

    @property
    def has_more(self) -> bool:
        return self.page is not None and self.page.has_next_page

    # Lifecycle

    def mount(self, on_change: Optional[Callable[[], None]] = None) -> None:
        """Start following cache changes for this content item.

        Args:
            on_change: Called after any entry of this item changes
        """

        def listener(key: QueryKey) -> None:
            if key == self.key and self.cache.is_stale(key):
                self.needs_refresh = True
            if on_change is not None:
                on_change()

        self.unmount()
        self._unsubscribe = self.cache.subscribe(
            CommentKeys.item(self.content_item_id), listener
        )

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    # Loading

    async def load(self) -> Optional[CommentPage]:
        """Load the page for the current query.

        Failures the current view can recover from are kept in ``error``
        and the previous page stays visible.

        Raises:
            Exception: Failures that should reach the top-level fallback view
        """
        self.needs_refresh = False
        try:
            response = await self.list_comments.execute(
                ListCommentsRequest(
                    content_item_id=self.content_item_id, query=self.query
                )
            )
        except Exception as e:
            app_error = self.error_service.normalize(e)
            self.error_service.log_error(app_error)
            self.error = app_error
            if self.error_service.should_throw_to_boundary(app_error):
                raise
            return self.page

        self.error = None
        self.page = response.page
        self.ui_state.prune(node.id for node in self.visible_nodes())
        return self.page

    async def refresh(self) -> Optional[CommentPage]:
        return await self.load()

    async def refresh_if_needed(self) -> Optional[CommentPage]:
        """Reload when the cached page was invalidated since the last load."""
        if self.needs_refresh or self.cache.is_stale(self.key):
            return await self.load()
        return self.page

    async def set_sort_by(self, sort_by: SortField) -> Optional[CommentPage]:
        self.query = self.query.with_filters(sort_by=sort_by)
        return await self.load()

    async def set_sort_order(self, sort_order: SortOrder) -> Optional[CommentPage]:
        self.query = self.query.with_filters(sort_order=sort_order)
        return await self.load()

    async def load_more(self) -> bool:
        """Advance to the next page.

        Returns:
            False when the current page is already the last one
        """
        if not self.has_more:
            return False
        self.query = self.query.next_page()
        await self.load()
        return True

    # Rendering

    def nodes(self) -> list[CommentNode]:
        """Top-level render nodes of the current page."""
        if self.page is None:
            return []
        return self.thread_service.build(
            self.page.entries(), self.session.current_viewer()
        )

    def visible_nodes(self) -> list[CommentNode]:
        """Nodes in display order, skipping replies of collapsed nodes."""
        return list(
            ThreadService.flatten(self.nodes(), self.ui_state.is_expanded)
        )

    # Actions

    def toggle_replies(self, comment_id: CommentId) -> bool:
        """Show or hide the replies of a node. Returns the new value."""
        expanded = self.ui_state.toggle_replies(comment_id)
        # Replies of a collapsed node unmount and lose their state
        self.ui_state.prune(node.id for node in self.visible_nodes())
        return expanded

    async def submit(
        self,
        body: str,
        parent_id: Optional[CommentId] = None,
        optimistic: bool = False,
    ) -> Comment:
        """Post a comment or a reply, then reload the current page.

        With ``optimistic`` a top-level comment shows up as a pending
        entry right away; it is removed again if the post fails.

        Raises:
            MutationInFlightError: If a previous post is still in flight
            ValidationError: If the body length is out of range
        """
        temp_id = None
        if optimistic and parent_id is None and self.optimistic is not None:
            temp_id = self.optimistic.add(self.key, self.content_item_id, body)
            self.page = self.cache.get(self.key) or self.page

        try:
            response = await self.create_comment.execute(
                CreateCommentRequest(
                    content_item_id=self.content_item_id,
                    body=body,
                    parent_id=parent_id,
                )
            )
        except Exception:
            if temp_id is not None:
                self.optimistic.remove(self.key, temp_id)
                self.page = self.cache.get(self.key) or self.page
            raise

        logfire.debug("Comment submitted", comment_id=response.comment.id)
        if parent_id is not None:
            self.ui_state.close_reply_form(parent_id)
        await self.load()
        return response.comment

    def start_edit(self, comment_id: CommentId) -> None:
        self.ui_state.open_edit_form(comment_id)

    def cancel_edit(self, comment_id: CommentId) -> None:
        self.ui_state.close_edit_form(comment_id)

    async def edit(self, comment_id: CommentId, body: str) -> Comment:
        """Save a new body for a comment, then reload the current page.

        The edit form stays open when saving fails.

        Raises:
            MutationInFlightError: If a previous save is still in flight
            ValidationError: If the body length is out of range
        """
        response = await self.update_comment.execute(
            UpdateCommentRequest(comment_id=comment_id, body=body)
        )
        self.ui_state.close_edit_form(comment_id)
        await self.load()
        return response.comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment, then reload the current page.

        The comment stays in the thread as a tombstone with its replies.

        Raises:
            MutationInFlightError: If a previous delete is still in flight
        """
        await self.delete_comment.execute(DeleteCommentRequest(comment_id=comment_id))
        await self.load()
