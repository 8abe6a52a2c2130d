"""Remote comment source interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model import (
    Comment,
    CommentPage,
    CommentStatistics,
    ModerationResult,
)
from discuss.domain.value import (
    CommentBody,
    CommentId,
    CommentQuery,
    ContentItemId,
    ModerationAction,
)


class CommentSource(ABC):
    """Remote data source for the comment resource.

    Defines the contract the client core consumes. The server assembles
    comment trees and resolves capability flags for the requesting viewer.
    Implementations live in the adapter layer (HTTP) and the persistence
    layer (in-memory, for tests).
    """

    @abstractmethod
    async def list_comments(
        self, content_item_id: ContentItemId, query: CommentQuery
    ) -> CommentPage:
        """Fetch one page of top-level comments with nested replies.

        Args:
            content_item_id: The content item the comments belong to
            query: Page, limit and sort parameters

        Returns:
            Page envelope with comments already assembled into trees
        """
        pass

    @abstractmethod
    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Fetch a single comment.

        Args:
            comment_id: The comment's identifier

        Returns:
            The comment with its replies

        Raises:
            RemoteError: With status 404 if the comment does not exist
        """
        pass

    @abstractmethod
    async def create_comment(
        self,
        content_item_id: ContentItemId,
        body: CommentBody,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            content_item_id: Content item to comment on
            body: Validated comment text
            parent_id: Comment being replied to (None for top-level)

        Returns:
            The created comment as stored by the server
        """
        pass

    @abstractmethod
    async def update_comment(self, comment_id: CommentId, body: CommentBody) -> Comment:
        """Replace the body of a comment.

        Args:
            comment_id: The comment to edit
            body: Validated replacement text

        Returns:
            The updated comment (``updated_at`` bumped)
        """
        pass

    @abstractmethod
    async def delete_comment(self, comment_id: CommentId) -> None:
        """Soft-delete a comment.

        The comment becomes a tombstone; its replies are untouched.

        Args:
            comment_id: The comment to delete
        """
        pass

    @abstractmethod
    async def moderate_comments(
        self,
        comment_ids: list[CommentId],
        action: ModerationAction,
        reason: Optional[str] = None,
    ) -> ModerationResult:
        """Apply ``action`` to each comment independently.

        Args:
            comment_ids: Comments to moderate
            action: Action applied to every id
            reason: Optional note recorded with the action

        Returns:
            Aggregate result with per-item failures
        """
        pass

    @abstractmethod
    async def get_statistics(self) -> CommentStatistics:
        """Fetch site-wide comment counters."""
        pass
