"""Typed identifiers for discussion entities.

Identifiers are issued by the server and treated as opaque strings on the
client. NewType keeps a comment id from being passed where a content item id
is expected.
"""

import itertools
import time
from typing import NewType

CommentId = NewType("CommentId", str)
ContentItemId = NewType("ContentItemId", str)
UserId = NewType("UserId", str)

TEMP_ID_PREFIX = "temp-"

_temp_sequence = itertools.count(1)


def make_temp_id() -> CommentId:
    """Synthesize an identifier for an optimistic, not yet confirmed comment.

    A timestamp plus a process-wide sequence number, so two entries made
    within the same clock tick still get distinct ids.
    """
    return CommentId(f"{TEMP_ID_PREFIX}{time.time_ns()}-{next(_temp_sequence)}")


def is_temp_id(comment_id: str) -> bool:
    """Whether ``comment_id`` was synthesized locally."""
    return comment_id.startswith(TEMP_ID_PREFIX)
