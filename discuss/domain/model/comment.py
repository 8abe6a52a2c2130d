"""Comment entity.

Comments are threaded discussions on a content item (a news article).
The server delivers them already nested: every comment owns its ``replies``
and the client never rebuilds the tree from a flat list.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, ContentItemId, UserId, UserRole


class CommentAuthor(DomainModel):
    """Author details embedded in a comment for display."""

    id: UserId
    username: str
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a content item or a reply to another
    comment on the same item.

    ``can_edit`` and ``can_delete`` are resolved by the server for whoever
    made the request. They describe that viewer only and are meaningless
    for anyone else.

    Soft-deleted comments keep their place in the tree (``is_deleted`` is a
    tombstone); their ``replies`` stay attached and visible.
    """

    id: CommentId
    content_item_id: ContentItemId
    author_id: UserId
    author: Optional[CommentAuthor] = None
    parent_id: Optional[CommentId] = None
    body: str = ""
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    can_edit: bool = False
    can_delete: bool = False
    replies: list["Comment"] = Field(default_factory=list)
    reply_count: int = Field(default=0, ge=0)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    @property
    def is_edited(self) -> bool:
        """Whether the body changed after creation."""
        return self.updated_at != self.created_at

    @property
    def has_replies(self) -> bool:
        return bool(self.replies)

    def tombstoned(self) -> "Comment":
        """Return the soft-deleted form of this comment.

        The body is cleared; replies are kept as they are.
        """
        return self.model_copy(update={"is_deleted": True, "body": ""})

    def iter_subtree(self):
        """Yield this comment and every descendant in pre-order."""
        yield self
        for reply in self.replies:
            yield from reply.iter_subtree()
