"""Cache keys for comment views.

Keys nest, so invalidating a shorter key reaches every longer key that
starts with it:

    ("comments",)                                 whole namespace
    ("comments", "item", item_id)                 every list query for an item
    ("comments", "item", item_id, query)          one page of one list
    ("comments", "detail", comment_id)            one comment
    ("comments", "statistics")                    dashboard counters
"""

from discuss.domain.repository import QueryKey
from discuss.domain.value import CommentId, CommentQuery, ContentItemId


class CommentKeys:
    """Factory for comment cache keys."""

    ALL: QueryKey = ("comments",)

    @classmethod
    def all(cls) -> QueryKey:
        return cls.ALL

    @classmethod
    def item(cls, content_item_id: ContentItemId) -> QueryKey:
        """Prefix covering every list view of one content item."""
        return (*cls.ALL, "item", content_item_id)

    @classmethod
    def item_query(cls, content_item_id: ContentItemId, query: CommentQuery) -> QueryKey:
        """Key of one list view (one page under one sort)."""
        return (*cls.item(content_item_id), query)

    @classmethod
    def detail(cls, comment_id: CommentId) -> QueryKey:
        return (*cls.ALL, "detail", comment_id)

    @classmethod
    def statistics(cls) -> QueryKey:
        return (*cls.ALL, "statistics")
