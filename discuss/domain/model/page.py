"""Paginated comment list envelope."""

import math
from typing import Any

from pydantic import Field, model_validator

from discuss.domain.model.comment import Comment
from discuss.domain.model.common import DomainModel
from discuss.domain.model.thread import ConfirmedComment, PendingComment, ThreadEntry
from discuss.domain.value import CommentId


def count_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items, ``limit`` per page."""
    return math.ceil(total / limit)


class CommentPage(DomainModel):
    """One page of top-level comments for a content item.

    Invariants:
    - ``total_pages == ceil(total / limit)``
    - ``0 <= (page - 1) * limit < total`` whenever ``total > 0``

    ``pending`` holds optimistic entries spliced in by the client. The server
    never sends any, so a refetch drops them.
    """

    comments: list[Comment] = Field(default_factory=list)
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    pending: list[PendingComment] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fill_total_pages(cls, data: Any) -> Any:
        """Derive ``total_pages`` when the envelope omits it."""
        if isinstance(data, dict) and data.get("total_pages") is None:
            total, limit = data.get("total"), data.get("limit")
            if isinstance(total, int) and isinstance(limit, int) and limit > 0:
                data = {**data, "total_pages": count_pages(total, limit)}
        return data

    @model_validator(mode="after")
    def check_pagination(self) -> "CommentPage":
        """Validate page arithmetic."""
        expected = count_pages(self.total, self.limit)
        if self.total_pages != expected:
            raise ValueError(
                f"total_pages {self.total_pages} does not match "
                f"ceil({self.total} / {self.limit}) = {expected}"
            )
        if self.total > 0 and (self.page - 1) * self.limit >= self.total:
            raise ValueError(
                f"page {self.page} is out of range for {self.total} comments"
            )
        return self

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    def entries(self) -> list[ThreadEntry]:
        """Visible entries: optimistic ones first, then server comments."""
        confirmed = [ConfirmedComment(comment=c) for c in self.comments]
        return [*self.pending, *confirmed]

    def with_pending(self, entry: PendingComment) -> "CommentPage":
        """Return a copy with ``entry`` spliced in at the top."""
        total = self.total + 1
        return self.model_copy(
            update={
                "pending": [entry, *self.pending],
                "total": total,
                "total_pages": count_pages(total, self.limit),
            }
        )

    def without_pending(self, temp_id: CommentId) -> "CommentPage":
        """Return a copy with the optimistic entry ``temp_id`` removed.

        Unknown ids leave the page unchanged.
        """
        remaining = [p for p in self.pending if p.temp_id != temp_id]
        if len(remaining) == len(self.pending):
            return self
        total = max(0, self.total - 1)
        return self.model_copy(
            update={
                "pending": remaining,
                "total": total,
                "total_pages": count_pages(total, self.limit),
            }
        )
