"""Comment tree assembly and render contract.

Turns the nested comments delivered by the server into render nodes that
carry their depth and the viewer's capabilities. The input tree is
read-only; every render pass builds fresh nodes.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

from discuss.domain.model import (
    Comment,
    ConfirmedComment,
    PendingComment,
    ThreadEntry,
    Viewer,
)
from discuss.domain.value import CommentId

from .base import Service
from .permission_service import NO_CAPABILITIES, CommentCapabilities, PermissionService

REMOVED_PLACEHOLDER = "[comment removed]"


@dataclass(frozen=True)
class CommentNode:
    """Node of a rendered comment thread.

    Holds the comment, how deep it sits and what the viewer may do with
    it. Children are built from ``comment.replies`` in the same order.
    """

    comment: Comment
    depth: int
    capabilities: CommentCapabilities
    children: list["CommentNode"] = field(default_factory=list)
    pending: bool = False

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def display_body(self) -> str:
        """Body to show; tombstones show a placeholder."""
        if self.comment.is_deleted:
            return REMOVED_PLACEHOLDER
        return self.comment.body

    @property
    def has_toggle(self) -> bool:
        """Only nodes with replies get an expand/collapse control."""
        return bool(self.children)


class ThreadService(Service):
    """Builds and walks rendered comment threads."""

    def __init__(self, permission_service: PermissionService) -> None:
        """Initialize thread service.

        Args:
            permission_service: Resolves per-node capabilities
        """
        self.permission_service = permission_service

    @property
    def max_depth(self) -> int:
        return self.permission_service.max_depth

    def build_node(
        self, comment: Comment, viewer: Optional[Viewer], depth: int = 0
    ) -> CommentNode:
        """Build the node for ``comment`` and, recursively, its replies.

        Tombstones recurse exactly like live comments, so deleting a
        comment never hides its subtree.
        """
        return CommentNode(
            comment=comment,
            depth=depth,
            capabilities=self.permission_service.resolve(comment, viewer, depth),
            children=[
                self.build_node(reply, viewer, depth + 1) for reply in comment.replies
            ],
        )

    def build(
        self,
        entries: Iterable[Union[ThreadEntry, Comment]],
        viewer: Optional[Viewer],
    ) -> list[CommentNode]:
        """Build top-level nodes for a list view.

        Pending optimistic entries become childless nodes with no actions
        until the server confirms them.

        Args:
            entries: Comments or thread entries in display order
            viewer: Current viewer (None when signed out)

        Returns:
            One node per top-level entry
        """
        nodes: list[CommentNode] = []
        for entry in entries:
            if isinstance(entry, PendingComment):
                nodes.append(
                    CommentNode(
                        comment=entry.comment,
                        depth=0,
                        capabilities=NO_CAPABILITIES,
                        pending=True,
                    )
                )
            elif isinstance(entry, ConfirmedComment):
                nodes.append(self.build_node(entry.comment, viewer))
            else:
                nodes.append(self.build_node(entry, viewer))
        return nodes

    @staticmethod
    def flatten(
        nodes: Iterable[CommentNode],
        is_expanded: Callable[[CommentId], bool] = lambda _: True,
    ) -> Iterator[CommentNode]:
        """Walk nodes depth-first, pre-order.

        A node is yielded before its children. Children of collapsed nodes
        are skipped.

        Args:
            nodes: Top-level nodes
            is_expanded: Whether a node's replies are currently shown
        """
        for node in nodes:
            yield node
            if node.children and is_expanded(node.id):
                yield from ThreadService.flatten(node.children, is_expanded)

    @staticmethod
    def count_nodes(nodes: Iterable[CommentNode]) -> int:
        """Count nodes including every descendant."""
        return sum(1 + ThreadService.count_nodes(node.children) for node in nodes)
