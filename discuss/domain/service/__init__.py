"""Domain services."""

from .base import Service
from .notifier import Notifier
from .permission_service import (
    DEFAULT_MAX_DEPTH,
    NO_CAPABILITIES,
    CommentCapabilities,
    PermissionService,
)
from .thread_service import REMOVED_PLACEHOLDER, CommentNode, ThreadService

__all__ = [
    "CommentCapabilities",
    "CommentNode",
    "DEFAULT_MAX_DEPTH",
    "NO_CAPABILITIES",
    "Notifier",
    "PermissionService",
    "REMOVED_PLACEHOLDER",
    "Service",
    "ThreadService",
]
