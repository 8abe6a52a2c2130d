"""Bulk moderation outcome."""

from pydantic import Field, model_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId


class FailedItem(DomainModel):
    """A comment the moderation action could not be applied to."""

    id: CommentId
    error: str


class ModerationResult(DomainModel):
    """Aggregate result of a bulk moderation request.

    Partial failure is a normal outcome of a batch, so callers get counts
    and the failed ids rather than a single pass/fail.
    """

    success_count: int = Field(ge=0)
    failed_count: int = Field(ge=0)
    total_count: int = Field(ge=0)
    failed_items: list[FailedItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_counts(self) -> "ModerationResult":
        """Validate that the counts add up."""
        if self.success_count + self.failed_count != self.total_count:
            raise ValueError(
                f"success_count ({self.success_count}) + failed_count "
                f"({self.failed_count}) != total_count ({self.total_count})"
            )
        if len(self.failed_items) != self.failed_count:
            raise ValueError(
                f"{len(self.failed_items)} failed items listed, "
                f"failed_count is {self.failed_count}"
            )
        return self

    @property
    def all_succeeded(self) -> bool:
        return self.failed_count == 0
