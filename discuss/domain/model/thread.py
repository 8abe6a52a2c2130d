"""Entries of a cached comment list.

A cached list may hold confirmed comments from the server and optimistic
entries the client synthesized before the server answered. The two are
kept as a tagged variant so a pending entry is found by its temporary id
and never confused with a server id.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from discuss.domain.model.comment import Comment
from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId


class ConfirmedComment(DomainModel):
    """A comment the server has acknowledged."""

    kind: Literal["confirmed"] = "confirmed"
    comment: Comment

    @property
    def entry_id(self) -> CommentId:
        return self.comment.id


class PendingComment(DomainModel):
    """An optimistic comment awaiting server confirmation."""

    kind: Literal["pending"] = "pending"
    temp_id: CommentId
    comment: Comment

    @property
    def entry_id(self) -> CommentId:
        return self.temp_id


ThreadEntry = Annotated[
    Union[ConfirmedComment, PendingComment], Field(discriminator="kind")
]
