"""Per-viewer capability resolution."""

from typing import Optional

from discuss.domain.model import Comment, Viewer
from discuss.domain.value.common import ValueObject

from .base import Service

DEFAULT_MAX_DEPTH = 5


class CommentCapabilities(ValueObject):
    """Actions a viewer is offered on one comment."""

    can_reply: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_report: bool = False


NO_CAPABILITIES = CommentCapabilities()


class PermissionService(Service):
    """Decides which affordances a comment offers to a viewer.

    Combines the server-issued ``can_edit``/``can_delete`` flags with the
    viewer's role. The moderator override only changes what the UI offers;
    the server still enforces every action.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize permission service.

        Args:
            max_depth: Deepest level (ancestor links from a top-level
                comment) below which replies are still offered
        """
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self.max_depth = max_depth

    def can_reply(self, comment: Comment, depth: int) -> bool:
        """Replies are offered on live comments above the depth bound."""
        return depth < self.max_depth and not comment.is_deleted

    def can_edit(self, comment: Comment) -> bool:
        """Editing follows the server flag and is never offered on tombstones."""
        return comment.can_edit and not comment.is_deleted

    def can_delete(self, comment: Comment, viewer: Optional[Viewer]) -> bool:
        """Server flag, or any moderator/admin viewer."""
        if comment.can_delete:
            return True
        return viewer is not None and viewer.is_moderator

    def can_report(self, comment: Comment, viewer: Optional[Viewer]) -> bool:
        """Signed-in viewers may report live comments they did not write."""
        if viewer is None or comment.is_deleted:
            return False
        return viewer.user_id != comment.author_id

    def resolve(
        self, comment: Comment, viewer: Optional[Viewer], depth: int
    ) -> CommentCapabilities:
        """Resolve every capability of ``comment`` for ``viewer`` at ``depth``.

        Args:
            comment: The comment being rendered
            viewer: Current viewer (None when signed out)
            depth: Ancestor links between the comment and its top-level root

        Returns:
            Capabilities for this render pass
        """
        return CommentCapabilities(
            can_reply=self.can_reply(comment, depth),
            can_edit=self.can_edit(comment),
            can_delete=self.can_delete(comment, viewer),
            can_report=self.can_report(comment, viewer),
        )
