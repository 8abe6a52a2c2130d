"""Plain-text rendering of comment threads.

Used by the terminal preview and in tests to check what a reader sees.
"""

from collections.abc import Callable, Iterable

from discuss.domain.service import CommentNode, ThreadService
from discuss.domain.value import CommentId

INDENT = "  "


def action_labels(node: CommentNode) -> list[str]:
    """Labels of the actions offered on ``node``, in display order."""
    capabilities = node.capabilities
    labels = []
    if capabilities.can_reply:
        labels.append("reply")
    if capabilities.can_edit:
        labels.append("edit")
    if capabilities.can_delete:
        labels.append("delete")
    if capabilities.can_report:
        labels.append("report")
    return labels


def format_node(node: CommentNode, expanded: bool = True) -> str:
    """One line for ``node``: author, body, markers and actions."""
    comment = node.comment
    author = comment.author.username if comment.author else comment.author_id
    parts = [f"{INDENT * node.depth}{author}: {node.display_body}"]
    if comment.is_edited and not comment.is_deleted:
        parts.append("(edited)")
    if node.pending:
        parts.append("(sending)")
    if node.has_toggle:
        count = len(node.children)
        noun = "reply" if count == 1 else "replies"
        parts.append(f"[{'-' if expanded else '+'} {count} {noun}]")
    labels = action_labels(node)
    if labels:
        parts.append(f"<{' | '.join(labels)}>")
    return " ".join(parts)


def render_thread(
    nodes: Iterable[CommentNode],
    is_expanded: Callable[[CommentId], bool] = lambda _: True,
) -> str:
    """Render a thread in display order, one line per visible node."""
    return "\n".join(
        format_node(node, is_expanded(node.id))
        for node in ThreadService.flatten(nodes, is_expanded)
    )
