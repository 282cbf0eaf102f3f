"""Thread reconstruction from flat or pre-nested comment records."""

from collections.abc import Iterable

import logfire

from ead.domain.model import DEFAULT_MAX_DEPTH, Comment, CommentForest, ThreadNode
from ead.domain.value import CommentId

from .base import Service


class ThreadBuilder(Service):
    """Builds a rooted forest from comment records.

    Some endpoints return a flat list where every reply carries its
    ``parent_id``; others nest replies under their root and omit the
    ``parent_id`` on the nested children. Both shapes are unified here.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize thread builder.

        Args:
            max_depth: Traversal guard used by ``thread_under``
        """
        self.max_depth = max_depth

    def build(self, records: Iterable[Comment]) -> CommentForest:
        """Build a forest of roots and children lists.

        Algorithm:
        1. Flatten records and their nested ``replies`` in encounter order,
           giving nested children without a parent the owner's id
        2. Drop later duplicates of an id already seen
        3. Classify every record as root, child of a known parent, or orphan

        Args:
            records: Comments as returned by the gateway

        Returns:
            CommentForest with roots, children per parent and orphans
        """
        with self.span("build"):
            by_id: dict[CommentId, Comment] = {}
            ordered: list[Comment] = []

            for record in records:
                stack: list[tuple[Comment, CommentId | None]] = [(record, None)]
                while stack:
                    comment, owner_id = stack.pop()
                    nested = comment.replies
                    updates: dict = {}
                    if comment.parent_id is None and owner_id is not None:
                        updates["parent_id"] = owner_id
                    if nested:
                        updates["replies"] = ()
                    if updates:
                        comment = comment.model_copy(update=updates)

                    if comment.id not in by_id:
                        by_id[comment.id] = comment
                        ordered.append(comment)

                    for child in reversed(nested):
                        stack.append((child, comment.id))

            forest = CommentForest(by_id=by_id)
            for comment in ordered:
                parent_id = comment.parent_id
                if parent_id is None:
                    forest.roots.append(comment)
                elif parent_id == comment.id or parent_id not in by_id:
                    forest.orphans.append(comment)
                else:
                    forest.children_by_parent.setdefault(parent_id, []).append(
                        comment
                    )

            if forest.orphans:
                logfire.warn(
                    "Orphaned replies excluded from thread",
                    count=len(forest.orphans),
                    orphan_ids=[str(c.id) for c in forest.orphans],
                )
            logfire.info(
                "Thread built",
                comments=len(ordered),
                roots=len(forest.roots),
                orphans=len(forest.orphans),
            )
            return forest

    def thread_under(
        self, forest: CommentForest, root_id: CommentId
    ) -> list[ThreadNode]:
        """Depth-annotated replies under a root, in display order.

        Direct replies to the root have depth 1.
        """
        return list(forest.walk(root_id, depth=1, max_depth=self.max_depth))
