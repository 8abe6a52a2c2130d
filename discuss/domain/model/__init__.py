"""Domain model entities for discussions."""

from discuss.domain.model.comment import Comment, CommentAuthor
from discuss.domain.model.moderation import FailedItem, ModerationResult
from discuss.domain.model.page import CommentPage, count_pages
from discuss.domain.model.statistics import CommentStatistics
from discuss.domain.model.thread import ConfirmedComment, PendingComment, ThreadEntry
from discuss.domain.model.viewer import Viewer

__all__ = [
    "Comment",
    "CommentAuthor",
    "CommentPage",
    "CommentStatistics",
    "ConfirmedComment",
    "FailedItem",
    "ModerationResult",
    "PendingComment",
    "ThreadEntry",
    "Viewer",
    "count_pages",
]
