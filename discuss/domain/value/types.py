"""Discussion value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules shared by every screen that submits or
queries comments.
"""

from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject

COMMENT_BODY_MIN_LENGTH = 3
COMMENT_BODY_MAX_LENGTH = 2000


class UserRole(str, Enum):
    """Role of the viewer as reported by the session provider."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @property
    def is_moderator(self) -> bool:
        """Moderators and admins share the moderation affordances."""
        return self in (UserRole.MODERATOR, UserRole.ADMIN)


class SortField(str, Enum):
    """Field a comment list is ordered by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    """Direction of a comment list ordering."""

    ASC = "asc"
    DESC = "desc"


class ModerationAction(str, Enum):
    """Action applied to every comment in a bulk moderation request."""

    DELETE = "delete"
    RESTORE = "restore"


class CommentBody(RootValueObject[str]):
    """Text submitted for a new or edited comment.

    Must be 3-2000 characters. Checked before any request leaves the
    client; the server remains authoritative.
    """

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        """Validate body length."""
        if len(v) < COMMENT_BODY_MIN_LENGTH:
            raise ValueError(
                f"Comment must be at least {COMMENT_BODY_MIN_LENGTH} characters"
            )
        if len(v) > COMMENT_BODY_MAX_LENGTH:
            raise ValueError(
                f"Comment must be at most {COMMENT_BODY_MAX_LENGTH} characters"
            )
        return v
