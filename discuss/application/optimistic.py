"""Optimistic comment entries.

Opt-in helper for views that want a new comment to appear before the
server confirms it. The entry is spliced into a cached page as a
``PendingComment``. On success the invalidation-triggered refetch
replaces the page and the entry disappears with it. On failure the
caller removes it by temporary id.
"""

from datetime import datetime
from typing import Optional

import logfire

from discuss.domain.model import Comment, CommentPage, PendingComment
from discuss.domain.repository import QueryCache, QueryKey, SessionProvider
from discuss.domain.value import CommentId, ContentItemId, UserId, make_temp_id


class OptimisticComments:
    """Adds and removes pending entries in cached comment pages."""

    def __init__(self, cache: QueryCache, session: SessionProvider) -> None:
        self.cache = cache
        self.session = session

    def add(
        self,
        key: QueryKey,
        content_item_id: ContentItemId,
        body: str,
        parent_id: Optional[CommentId] = None,
    ) -> CommentId:
        """Splice a pending comment into the page cached under ``key``.

        Nothing is written when no page is cached there yet.

        Returns:
            Temporary id of the pending entry
        """
        temp_id = make_temp_id()
        viewer = self.session.current_viewer()
        now = datetime.now()
        comment = Comment(
            id=temp_id,
            content_item_id=content_item_id,
            author_id=viewer.user_id if viewer else UserId(""),
            parent_id=parent_id,
            body=body,
            created_at=now,
            updated_at=now,
            reply_count=0,
        )
        entry = PendingComment(temp_id=temp_id, comment=comment)

        def splice(page: Optional[CommentPage]) -> Optional[CommentPage]:
            return page.with_pending(entry) if page is not None else None

        self.cache.set(key, splice)
        logfire.debug("Optimistic comment added", temp_id=temp_id)
        return temp_id

    def remove(self, key: QueryKey, temp_id: CommentId) -> None:
        """Remove the pending entry ``temp_id`` from the page under ``key``."""

        def drop(page: Optional[CommentPage]) -> Optional[CommentPage]:
            return page.without_pending(temp_id) if page is not None else None

        self.cache.set(key, drop)
        logfire.debug("Optimistic comment removed", temp_id=temp_id)
