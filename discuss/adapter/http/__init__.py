"""REST adapter for the comment API."""

from .comment_source import HttpCommentSource

__all__ = ["HttpCommentSource"]
