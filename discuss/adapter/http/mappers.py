"""Mappers between the REST wire format and domain models.

The API names things after the news platform (``processed_news_id``,
``content``, ``user_id``); the domain uses neutral names. Payloads are
mapped by hand in both directions.
"""

from typing import Any, Dict, Optional

from discuss.domain.model import (
    Comment,
    CommentAuthor,
    CommentPage,
    CommentStatistics,
    ModerationResult,
)
from discuss.domain.value import (
    CommentBody,
    CommentId,
    ContentItemId,
    ModerationAction,
    UserId,
    UserRole,
)


def _role(value: Optional[str]) -> UserRole:
    try:
        return UserRole(value) if value else UserRole.USER
    except ValueError:
        return UserRole.USER


def wire_to_author(data: Dict[str, Any]) -> CommentAuthor:
    """Convert an embedded ``user`` object to CommentAuthor."""
    return CommentAuthor(
        id=UserId(str(data["id"])),
        username=data.get("username") or "",
        avatar_url=data.get("avatar_url"),
        role=_role(data.get("role")),
    )


def wire_to_comment(data: Dict[str, Any]) -> Comment:
    """Convert a comment payload (with nested replies) to Comment.

    Args:
        data: Decoded JSON object

    Returns:
        Comment domain model
    """
    replies = [wire_to_comment(reply) for reply in data.get("replies") or []]
    parent_id = data.get("parent_id")
    user = data.get("user")
    return Comment(
        id=CommentId(str(data["id"])),
        content_item_id=ContentItemId(str(data["processed_news_id"])),
        author_id=UserId(str(data.get("user_id", ""))),
        author=wire_to_author(user) if user else None,
        parent_id=CommentId(str(parent_id)) if parent_id else None,
        body=data.get("content") or "",
        is_deleted=bool(data.get("is_deleted", False)),
        created_at=data["created_at"],
        updated_at=data.get("updated_at") or data["created_at"],
        can_edit=bool(data.get("can_edit", False)),
        can_delete=bool(data.get("can_delete", False)),
        replies=replies,
        reply_count=data.get("reply_count") or len(replies),
    )


def wire_to_page(data: Dict[str, Any]) -> CommentPage:
    """Convert a list envelope to CommentPage.

    ``totalPages`` is optional on the wire and derived when absent.
    """
    return CommentPage(
        comments=[wire_to_comment(c) for c in data.get("comments") or []],
        total=data["total"],
        page=data["page"],
        limit=data["limit"],
        total_pages=data.get("totalPages"),
    )


def wire_to_moderation_result(data: Dict[str, Any]) -> ModerationResult:
    """Convert a bulk moderation response to ModerationResult."""
    return ModerationResult.model_validate(data)


def wire_to_statistics(data: Dict[str, Any]) -> CommentStatistics:
    """Convert a statistics response to CommentStatistics."""
    return CommentStatistics.model_validate(data)


def create_payload(
    content_item_id: ContentItemId,
    body: CommentBody,
    parent_id: Optional[CommentId] = None,
) -> Dict[str, Any]:
    """Build the body of a create request."""
    payload: Dict[str, Any] = {
        "content": body.root,
        "processed_news_id": content_item_id,
    }
    if parent_id:
        payload["parent_id"] = parent_id
    return payload


def update_payload(body: CommentBody) -> Dict[str, Any]:
    """Build the body of an update request."""
    return {"content": body.root}


def moderation_payload(
    comment_ids: list[CommentId],
    action: ModerationAction,
    reason: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the body of a bulk moderation request."""
    payload: Dict[str, Any] = {
        "comment_ids": list(comment_ids),
        "action": action.value,
    }
    if reason:
        payload["reason"] = reason
    return payload
