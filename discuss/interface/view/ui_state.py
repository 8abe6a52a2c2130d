"""Node-local UI state for comment threads."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from discuss.domain.value import CommentId


@dataclass(frozen=True)
class NodeUIState:
    """Toggles of one rendered comment."""

    replies_expanded: bool = True
    reply_form_open: bool = False
    edit_form_open: bool = False


DEFAULT_NODE_STATE = NodeUIState()


class ThreadUIState:
    """UI state of every mounted comment node, keyed by comment id.

    Owned by the view, never stored on the comments themselves. State
    survives refetches as long as the comment stays in the tree; a node
    that leaves the tree is pruned and comes back with defaults.
    """

    def __init__(self) -> None:
        self._nodes: dict[CommentId, NodeUIState] = {}

    def get(self, comment_id: CommentId) -> NodeUIState:
        return self._nodes.get(comment_id, DEFAULT_NODE_STATE)

    def is_expanded(self, comment_id: CommentId) -> bool:
        return self.get(comment_id).replies_expanded

    def toggle_replies(self, comment_id: CommentId) -> bool:
        """Flip whether replies are shown. Returns the new value."""
        expanded = not self.is_expanded(comment_id)
        self._update(comment_id, replies_expanded=expanded)
        return expanded

    def open_reply_form(self, comment_id: CommentId) -> None:
        self._update(comment_id, reply_form_open=True)

    def close_reply_form(self, comment_id: CommentId) -> None:
        self._update(comment_id, reply_form_open=False)

    def open_edit_form(self, comment_id: CommentId) -> None:
        self._update(comment_id, edit_form_open=True)

    def close_edit_form(self, comment_id: CommentId) -> None:
        self._update(comment_id, edit_form_open=False)

    def prune(self, mounted: Iterable[CommentId]) -> int:
        """Forget state of nodes that are no longer mounted.

        Returns:
            Number of entries dropped
        """
        keep = set(mounted)
        gone = [comment_id for comment_id in self._nodes if comment_id not in keep]
        for comment_id in gone:
            del self._nodes[comment_id]
        return len(gone)

    def __len__(self) -> int:
        return len(self._nodes)

    def _update(self, comment_id: CommentId, **changes: bool) -> None:
        state = replace(self.get(comment_id), **changes)
        if state == DEFAULT_NODE_STATE:
            self._nodes.pop(comment_id, None)
        else:
            self._nodes[comment_id] = state
