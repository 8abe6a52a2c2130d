"""Views over comment threads."""

from .comments_section import CommentsSection
from .render import action_labels, format_node, render_thread
from .ui_state import DEFAULT_NODE_STATE, NodeUIState, ThreadUIState

__all__ = [
    "CommentsSection",
    "DEFAULT_NODE_STATE",
    "NodeUIState",
    "ThreadUIState",
    "action_labels",
    "format_node",
    "render_thread",
]
