"""In-memory implementations for testing."""

from .comment import InMemoryCommentSource

__all__ = ["InMemoryCommentSource"]
