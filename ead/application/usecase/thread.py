"""Response models shared by thread-returning use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from ead.domain.model import Comment, CommentForest, ThreadNode
from ead.domain.service import StatusTranslator


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    parent_id: str | None
    target_type: str | None
    target_id: str | None
    body: str
    rating: int | None
    status: str
    status_label: str
    author_name: str | None
    user_id: str | None
    created_at: datetime | None
    replies_count: int


class ThreadNodeResponse(CommentItem):
    """Comment with its position in a thread and its nested replies."""

    depth: int
    can_reply: bool
    replies: list["ThreadNodeResponse"] = Field(default_factory=list)


def comment_item(
    comment: Comment, translator: StatusTranslator, replies_count: int = 0
) -> CommentItem:
    """Convert a comment to a flat response item."""
    return CommentItem(**_item_fields(comment, translator, replies_count))


def thread_node(
    comment: Comment,
    depth: int,
    forest: CommentForest,
    translator: StatusTranslator,
    max_reply_depth: int | None,
) -> ThreadNodeResponse:
    """Convert a comment at a given depth to a thread node without replies."""
    return ThreadNodeResponse(
        **_item_fields(comment, translator, forest.replies_count(comment)),
        depth=depth,
        can_reply=max_reply_depth is None or depth < max_reply_depth,
    )


def nest_nodes(
    nodes: list[ThreadNode],
    forest: CommentForest,
    translator: StatusTranslator,
    max_reply_depth: int | None,
) -> list[ThreadNodeResponse]:
    """Rebuild nested replies from a depth-first traversal.

    ``nodes`` must be in traversal order, where each node directly follows
    its parent or an earlier sibling subtree.

    Returns:
        Top-level nodes of the traversal with their replies nested
    """
    top: list[ThreadNodeResponse] = []
    stack: list[ThreadNodeResponse] = []
    for node in nodes:
        response = thread_node(
            node.comment, node.depth, forest, translator, max_reply_depth
        )
        while stack and stack[-1].depth >= node.depth:
            stack.pop()
        if stack:
            stack[-1].replies.append(response)
        else:
            top.append(response)
        stack.append(response)
    return top


def root_thread(
    root: Comment,
    nodes: list[ThreadNode],
    forest: CommentForest,
    translator: StatusTranslator,
    max_reply_depth: int | None,
) -> ThreadNodeResponse:
    """Thread node for a root comment with the traversal under it nested."""
    response = thread_node(root, 0, forest, translator, max_reply_depth)
    response.replies = nest_nodes(nodes, forest, translator, max_reply_depth)
    return response


def _item_fields(
    comment: Comment, translator: StatusTranslator, replies_count: int
) -> dict:
    return {
        "comment_id": str(comment.id),
        "parent_id": str(comment.parent_id) if comment.parent_id else None,
        "target_type": comment.target_type.value if comment.target_type else None,
        "target_id": str(comment.target_id) if comment.target_id else None,
        "body": comment.body,
        "rating": comment.rating,
        "status": comment.status.value,
        "status_label": translator.translate(comment.status),
        "author_name": comment.author_name,
        "user_id": comment.user_id,
        "created_at": comment.created_at,
        "replies_count": replies_count,
    }
