"""Comment statistics shown on the moderation dashboard."""

from pydantic import Field

from discuss.domain.model.common import DomainModel


class CommentStatistics(DomainModel):
    """Site-wide comment counters."""

    total_comments: int = Field(ge=0)
    active_comments: int = Field(ge=0)
    deleted_comments: int = Field(ge=0)
    top_level_comments: int = Field(ge=0)
    reply_comments: int = Field(ge=0)
    comments_today: int = Field(default=0, ge=0)
    comments_this_week: int = Field(default=0, ge=0)
    comments_this_month: int = Field(default=0, ge=0)
