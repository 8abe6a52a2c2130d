"""Pagination and sort parameters for comment lists."""

from typing import Any

from pydantic import Field

from discuss.domain.value.common import ValueObject
from discuss.domain.value.types import SortField, SortOrder


class CommentQuery(ValueObject):
    """Page/limit/sort envelope for a comment list request.

    Each distinct query is cached under its own key, so a query is frozen
    and hashable. Use ``with_filters`` and ``next_page`` to derive new ones.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    include_deleted: bool = False

    def with_filters(self, **changes: Any) -> "CommentQuery":
        """Return a copy with ``changes`` applied.

        Changing anything other than ``page`` resets ``page`` to 1, since
        the old page number refers to a different result set.
        """
        if any(name != "page" for name in changes):
            changes.setdefault("page", 1)
        return self.model_validate({**self.model_dump(), **changes})

    def next_page(self) -> "CommentQuery":
        """Return the query for the following page."""
        return self.model_copy(update={"page": self.page + 1})

    def as_params(self) -> dict[str, str]:
        """Render as URL query parameters."""
        params = {
            "page": str(self.page),
            "limit": str(self.limit),
            "sort_by": self.sort_by.value,
            "sort_order": self.sort_order.value,
        }
        if self.include_deleted:
            params["include_deleted"] = "true"
        return params
