"""In-memory comment source for testing."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from discuss.adapter.error import RemoteError
from discuss.domain.model import (
    Comment,
    CommentPage,
    CommentStatistics,
    FailedItem,
    ModerationResult,
    Viewer,
    count_pages,
)
from discuss.domain.repository import CommentSource, SessionProvider
from discuss.domain.value import (
    CommentBody,
    CommentId,
    CommentQuery,
    ContentItemId,
    ModerationAction,
    SortOrder,
)


class InMemoryCommentSource(CommentSource):
    """In-memory implementation of CommentSource for testing.

    Behaves like the remote API: stores comments flat, assembles trees on
    read, resolves ``can_edit``/``can_delete`` for the current viewer and
    answers failures with the same ``RemoteError`` statuses.

    Tombstones are listed whenever they still have visible replies, so a
    deleted comment never takes its subtree with it.
    """

    def __init__(
        self,
        session: SessionProvider,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._session = session
        self._now = now
        self._comments: dict[CommentId, Comment] = {}
        self._moderation_failures: dict[CommentId, str] = {}
        self.calls: list[str] = []

    # Test helpers

    def add(self, comment: Comment) -> Comment:
        """Store ``comment`` as-is (replies are ignored; trees come from parent_id)."""
        self._comments[comment.id] = comment.model_copy(update={"replies": []})
        return comment

    def stored(self, comment_id: CommentId) -> Optional[Comment]:
        """Raw stored record, without tree assembly or viewer flags."""
        return self._comments.get(comment_id)

    def fail_moderation(self, comment_id: CommentId, error: str) -> None:
        """Make moderation of ``comment_id`` fail with ``error``."""
        self._moderation_failures[comment_id] = error

    # CommentSource

    async def list_comments(
        self, content_item_id: ContentItemId, query: CommentQuery
    ) -> CommentPage:
        self.calls.append("list")
        viewer = self._session.current_viewer()
        roots = [
            self._visible_tree(c, viewer, query.include_deleted)
            for c in self._comments.values()
            if c.content_item_id == content_item_id and c.parent_id is None
        ]
        visible = [c for c in roots if c is not None]
        visible.sort(
            key=lambda c: getattr(c, query.sort_by.value),
            reverse=query.sort_order == SortOrder.DESC,
        )

        # Pages past the end fall back to the last page
        page = query.page
        if visible and (page - 1) * query.limit >= len(visible):
            page = count_pages(len(visible), query.limit)
        start = (page - 1) * query.limit
        return CommentPage(
            comments=visible[start : start + query.limit],
            total=len(visible),
            page=page,
            limit=query.limit,
        )

    async def get_comment(self, comment_id: CommentId) -> Comment:
        self.calls.append("get")
        stored = self._require(comment_id)
        viewer = self._session.current_viewer()
        return self._assemble(stored, viewer)

    async def create_comment(
        self,
        content_item_id: ContentItemId,
        body: CommentBody,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        self.calls.append("create")
        viewer = self._require_viewer()
        if parent_id is not None:
            parent = self._require(parent_id)
            if parent.content_item_id != content_item_id:
                raise RemoteError(400, "Parent comment belongs to another item")
            if parent.is_deleted:
                raise RemoteError(400, "Cannot reply to a deleted comment")

        now = self._now()
        comment = Comment(
            id=CommentId(str(uuid4())),
            content_item_id=content_item_id,
            author_id=viewer.user_id,
            parent_id=parent_id,
            body=body.root,
            created_at=now,
            updated_at=now,
        )
        self._comments[comment.id] = comment
        return self._with_flags(comment, viewer)

    async def update_comment(self, comment_id: CommentId, body: CommentBody) -> Comment:
        self.calls.append("update")
        viewer = self._require_viewer()
        stored = self._require(comment_id)
        if stored.author_id != viewer.user_id:
            raise RemoteError(403, "Not authorized for this action")
        if stored.is_deleted:
            raise RemoteError(400, "Cannot edit a deleted comment")

        # updated_at must differ from created_at for the edited marker
        updated_at = max(self._now(), stored.created_at + timedelta(microseconds=1))
        updated = stored.model_copy(update={"body": body.root, "updated_at": updated_at})
        self._comments[comment_id] = updated
        return self._assemble(updated, viewer)

    async def delete_comment(self, comment_id: CommentId) -> None:
        self.calls.append("delete")
        viewer = self._require_viewer()
        stored = self._require(comment_id)
        if stored.author_id != viewer.user_id and not viewer.is_moderator:
            raise RemoteError(403, "Not authorized for this action")
        self._comments[comment_id] = stored.model_copy(update={"is_deleted": True})

    async def moderate_comments(
        self,
        comment_ids: list[CommentId],
        action: ModerationAction,
        reason: Optional[str] = None,
    ) -> ModerationResult:
        self.calls.append("moderate")
        viewer = self._require_viewer()
        if not viewer.is_moderator:
            raise RemoteError(403, "Not authorized for this action")

        failed: list[FailedItem] = []
        for comment_id in comment_ids:
            error = self._moderation_failures.get(comment_id)
            stored = self._comments.get(comment_id)
            if error is None and stored is None:
                error = "Comment not found"
            if error is not None:
                failed.append(FailedItem(id=comment_id, error=error))
                continue
            self._comments[comment_id] = stored.model_copy(
                update={"is_deleted": action == ModerationAction.DELETE}
            )

        return ModerationResult(
            success_count=len(comment_ids) - len(failed),
            failed_count=len(failed),
            total_count=len(comment_ids),
            failed_items=failed,
        )

    async def get_statistics(self) -> CommentStatistics:
        self.calls.append("statistics")
        comments = list(self._comments.values())
        now = self._now()

        def since(delta: timedelta) -> int:
            return sum(1 for c in comments if c.created_at >= now - delta)

        deleted = sum(1 for c in comments if c.is_deleted)
        top_level = sum(1 for c in comments if c.parent_id is None)
        return CommentStatistics(
            total_comments=len(comments),
            active_comments=len(comments) - deleted,
            deleted_comments=deleted,
            top_level_comments=top_level,
            reply_comments=len(comments) - top_level,
            comments_today=since(timedelta(days=1)),
            comments_this_week=since(timedelta(weeks=1)),
            comments_this_month=since(timedelta(days=30)),
        )

    # Internals

    def _require(self, comment_id: CommentId) -> Comment:
        comment = self._comments.get(comment_id)
        if comment is None:
            raise RemoteError(404, "Resource not found")
        return comment

    def _require_viewer(self) -> Viewer:
        viewer = self._session.current_viewer()
        if viewer is None:
            raise RemoteError(401, "Token not found")
        return viewer

    def _with_flags(self, comment: Comment, viewer: Optional[Viewer]) -> Comment:
        # The stored body survives deletion so a restore brings it back
        if comment.is_deleted:
            comment = comment.tombstoned()
        is_author = viewer is not None and viewer.user_id == comment.author_id
        return comment.model_copy(
            update={
                "can_edit": is_author and not comment.is_deleted,
                "can_delete": is_author or (viewer is not None and viewer.is_moderator),
            }
        )

    def _children(self, comment_id: CommentId) -> list[Comment]:
        return sorted(
            (c for c in self._comments.values() if c.parent_id == comment_id),
            key=lambda c: c.created_at,
        )

    def _assemble(self, comment: Comment, viewer: Optional[Viewer]) -> Comment:
        """Nest every descendant of ``comment``, tombstones included."""
        replies = [self._assemble(c, viewer) for c in self._children(comment.id)]
        assembled = comment.model_copy(
            update={"replies": replies, "reply_count": len(replies)}
        )
        return self._with_flags(assembled, viewer)

    def _visible_tree(
        self, comment: Comment, viewer: Optional[Viewer], include_deleted: bool
    ) -> Optional[Comment]:
        """Like ``_assemble`` but drops tombstones with nothing visible below."""
        replies = [
            reply
            for reply in (
                self._visible_tree(c, viewer, include_deleted)
                for c in self._children(comment.id)
            )
            if reply is not None
        ]
        if comment.is_deleted and not include_deleted and not replies:
            return None
        assembled = comment.model_copy(
            update={"replies": replies, "reply_count": len(replies)}
        )
        return self._with_flags(assembled, viewer)
