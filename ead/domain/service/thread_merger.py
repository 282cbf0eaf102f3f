"""Merging of partial and fully loaded reply views."""

from collections.abc import Iterable

from ead.domain.model import DEFAULT_MAX_DEPTH, Comment, CommentForest, ReplyMap, ThreadNode
from ead.domain.value import CommentId

from .base import Service


class ThreadMerger(Service):
    """Reconciles the replies visible on a results page with full threads.

    The moderation table first shows the replies that happen to be on the
    current page, then loads the complete thread of a comment through the
    dedicated replies endpoint. Both views must coexist: the full view is
    authoritative, and anything only the partial view knows is kept after it.
    """

    def merge(self, partial: ReplyMap, full: ReplyMap) -> ReplyMap:
        """Merge two reply maps keyed by parent id.

        For each parent id in either map the result is the full list followed
        by partial entries whose id the full list does not contain. Ids are
        never repeated within a parent, so merging is idempotent.

        Args:
            partial: Replies known from the current results page
            full: Replies loaded from the complete thread endpoint

        Returns:
            New reply map; inputs are not modified
        """
        merged: ReplyMap = {}
        for parent_id in _ordered_keys(full, partial):
            seen: set[CommentId] = set()
            replies: list[Comment] = []
            for comment in [*full.get(parent_id, []), *partial.get(parent_id, [])]:
                if comment.id in seen:
                    continue
                seen.add(comment.id)
                replies.append(comment)
            merged[parent_id] = replies
        return merged

    def group_by_parent(self, comments: Iterable[Comment]) -> ReplyMap:
        """Group replies by parent id, keeping encounter order.

        Roots are skipped; only comments with a parent are grouped.
        """
        grouped: ReplyMap = {}
        for comment in comments:
            if comment.parent_id is None:
                continue
            grouped.setdefault(comment.parent_id, []).append(comment)
        return grouped

    def annotate_depths(
        self,
        reply_map: ReplyMap,
        root_id: CommentId,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[ThreadNode]:
        """Depth-annotated thread under ``root_id`` from a reply map.

        The same comment can sit at different depths in different views, so
        depth is assigned here rather than stored on the comment.
        """
        forest = CommentForest(children_by_parent=reply_map)
        return list(forest.walk(root_id, depth=1, max_depth=max_depth))


def _ordered_keys(first: ReplyMap, second: ReplyMap) -> list[CommentId]:
    keys = list(first)
    keys.extend(key for key in second if key not in first)
    return keys
