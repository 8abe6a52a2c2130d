"""Domain value objects for discussions."""

from discuss.domain.value.identifiers import (
    TEMP_ID_PREFIX,
    CommentId,
    ContentItemId,
    UserId,
    is_temp_id,
    make_temp_id,
)
from discuss.domain.value.query import CommentQuery
from discuss.domain.value.types import (
    COMMENT_BODY_MAX_LENGTH,
    COMMENT_BODY_MIN_LENGTH,
    CommentBody,
    ModerationAction,
    SortField,
    SortOrder,
    UserRole,
)

__all__ = [
    # Identifiers
    "CommentId",
    "ContentItemId",
    "UserId",
    "TEMP_ID_PREFIX",
    "make_temp_id",
    "is_temp_id",
    # Types
    "CommentBody",
    "COMMENT_BODY_MIN_LENGTH",
    "COMMENT_BODY_MAX_LENGTH",
    "ModerationAction",
    "SortField",
    "SortOrder",
    "UserRole",
    # Queries
    "CommentQuery",
]
