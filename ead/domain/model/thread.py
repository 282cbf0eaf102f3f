"""Thread views derived from a set of comments.

A thread is a rooted forest: root comments plus, for every parent id, the
ordered list of its direct children. These structures are derived views;
they hold references to immutable ``Comment`` snapshots and can be rebuilt
from the same records at any time.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ead.domain.model.comment import Comment
from ead.domain.value import CommentId

# Replies grouped by parent comment id, in display order
ReplyMap = dict[CommentId, list[Comment]]

# Guard against cyclic parent chains in malformed backend data
DEFAULT_MAX_DEPTH = 50


@dataclass(frozen=True)
class ThreadNode:
    """A comment positioned in a thread traversal."""

    comment: Comment
    depth: int


@dataclass
class CommentForest:
    """Rooted forest of comments keyed by parent reference.

    Attributes:
        roots: Comments without a parent, in encounter order
        children_by_parent: Direct children per parent id, in encounter order
        orphans: Replies whose parent is not in the loaded set (not rendered)
        by_id: Every reachable or orphaned comment by id
    """

    roots: list[Comment] = field(default_factory=list)
    children_by_parent: ReplyMap = field(default_factory=dict)
    orphans: list[Comment] = field(default_factory=list)
    by_id: dict[CommentId, Comment] = field(default_factory=dict)

    def children_of(self, parent_id: CommentId) -> list[Comment]:
        """Direct children of a comment, or an empty list."""
        return list(self.children_by_parent.get(parent_id, []))

    def walk(
        self,
        parent_id: CommentId,
        depth: int = 1,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Iterator[ThreadNode]:
        """Traverse the replies under ``parent_id`` depth-first.

        Direct children of ``parent_id`` are yielded at ``depth``; each
        further level adds one. Nodes deeper than ``max_depth`` are not
        visited and no comment is yielded twice, so cyclic data terminates.

        Args:
            parent_id: Comment whose replies to traverse
            depth: Depth assigned to the direct children
            max_depth: Deepest level that is still yielded

        Yields:
            ThreadNode for each reachable reply, in display order
        """
        seen: set[CommentId] = {parent_id}
        stack: list[tuple[Comment, int]] = [
            (child, depth) for child in reversed(self.children_of(parent_id))
        ]
        while stack:
            comment, level = stack.pop()
            if comment.id in seen or level > max_depth:
                continue
            seen.add(comment.id)
            yield ThreadNode(comment=comment, depth=level)
            for child in reversed(self.children_of(comment.id)):
                stack.append((child, level + 1))

    def depth_of(
        self, comment_id: CommentId, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> int | None:
        """Depth of a comment by walking its parent chain (roots are 0).

        Returns None if the comment is unknown, orphaned, or its chain does
        not reach a root within ``max_depth`` steps.
        """
        comment = self.by_id.get(comment_id)
        depth = 0
        while comment is not None and depth <= max_depth:
            if comment.parent_id is None:
                return depth
            if comment.parent_id == comment.id:
                return None
            comment = self.by_id.get(comment.parent_id)
            depth += 1
        return None

    def replies_count(self, comment: Comment) -> int:
        """Number of replies to show for a comment.

        Prefers the backend aggregate and falls back to the number of
        direct children loaded locally.
        """
        if comment.replies_count is not None:
            return comment.replies_count
        return len(self.children_by_parent.get(comment.id, []))

    def __len__(self) -> int:
        return len(self.by_id)
