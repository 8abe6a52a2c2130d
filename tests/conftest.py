"""Test configuration and helpers."""

from datetime import datetime, timedelta
from itertools import count
from typing import Optional

from discuss.domain.model import Comment, CommentAuthor, Viewer
from discuss.domain.value import CommentId, ContentItemId, UserId, UserRole

BASE_TIME = datetime(2024, 5, 1, 12, 0, 0)
ITEM_ID = ContentItemId("news-1")
ALICE = Viewer(user_id=UserId("alice"), role=UserRole.USER)
BOB = Viewer(user_id=UserId("bob"), role=UserRole.USER)
MODERATOR = Viewer(user_id=UserId("mod"), role=UserRole.MODERATOR)

_ids = count(1)


def make_comment(
    comment_id: Optional[str] = None,
    author: Viewer | str = ALICE,
    parent_id: Optional[str] = None,
    body: str = "A comment body",
    content_item_id: ContentItemId = ITEM_ID,
    minutes: int = 0,
    **overrides,
) -> Comment:
    """Build a comment created ``minutes`` after BASE_TIME.

    Args:
        comment_id: Comment ID (generated when omitted)
        author: Viewer or user id of the author
        parent_id: Parent comment ID for replies
        body: Comment text
        content_item_id: Content item the comment belongs to
        minutes: Offset from BASE_TIME, used for ordering
        **overrides: Any other Comment field
    """
    author_id = UserId(author if isinstance(author, str) else author.user_id)
    created_at = BASE_TIME + timedelta(minutes=minutes)
    fields = {
        "id": CommentId(comment_id or f"c{next(_ids)}"),
        "content_item_id": content_item_id,
        "author_id": author_id,
        "author": CommentAuthor(id=author_id, username=str(author_id)),
        "parent_id": CommentId(parent_id) if parent_id else None,
        "body": body,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)


def nest(comment: Comment, *replies: Comment) -> Comment:
    """Attach ``replies`` to ``comment`` as the server would deliver them."""
    return comment.model_copy(
        update={"replies": list(replies), "reply_count": len(replies)}
    )
