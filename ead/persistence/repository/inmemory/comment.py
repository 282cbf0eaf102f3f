"""In-memory comment gateway for testing."""

from datetime import datetime
from math import ceil
from typing import Optional

from ead.adapter.error import CommentApiError
from ead.domain.model import Comment, Page
from ead.domain.repository import CommentGateway
from ead.domain.value import (
    CommentId,
    CommentStatus,
    StatusFilter,
    TargetId,
    TargetType,
)


class InMemoryCommentGateway(CommentGateway):
    """In-memory implementation of CommentGateway for testing.

    Behaves like the school backend: real pagination, approved-only public
    threads with nested replies, a reply depth limit, and 404s for unknown
    comments. Every call is recorded in ``calls``.
    """

    def __init__(self, max_depth: int = 3) -> None:
        self.max_depth = max_depth
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1
        self.calls: list[tuple] = []

    def add(self, comment: Comment) -> Comment:
        """Seed a comment, as if it already existed on the backend."""
        self._comments[comment.id] = comment
        if comment.id.isdigit():
            self._next_id = max(self._next_id, int(comment.id) + 1)
        return comment

    def get(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    def _require(self, comment_id: CommentId) -> Comment:
        comment = self._comments.get(comment_id)
        if comment is None:
            raise CommentApiError(f"Comment {comment_id} not found", status_code=404)
        return comment

    def _children(self, parent_id: CommentId) -> list[Comment]:
        return [c for c in self._comments.values() if c.parent_id == parent_id]

    def _depth(self, comment: Comment) -> int:
        depth = 0
        current = comment
        # Guard against cyclic chains
        while current.parent_id is not None and depth < 50:
            parent = self._comments.get(current.parent_id)
            if parent is None:
                break
            current = parent
            depth += 1
        return depth

    def _nest(self, comment: Comment) -> Comment:
        # Nested replies come without parent_id, like the public endpoints
        replies = tuple(
            self._nest(child).model_copy(update={"parent_id": None})
            for child in self._children(comment.id)
            if child.status is CommentStatus.APPROVED
        )
        return comment.model_copy(update={"replies": replies})

    @staticmethod
    def _paginate(items: list[Comment], page: int, per_page: int) -> Page[Comment]:
        last_page = max(1, ceil(len(items) / per_page))
        start = (page - 1) * per_page
        return Page[Comment](
            items=items[start : start + per_page],
            current_page=page,
            last_page=last_page,
            total=len(items),
        )

    @staticmethod
    def _matches(comment: Comment, status: StatusFilter) -> bool:
        return status is StatusFilter.ALL or comment.status.value == status.value

    async def list_for_target(
        self, target_type: TargetType, target_id: TargetId
    ) -> list[Comment]:
        """List approved roots of a target with their approved replies nested."""
        self.calls.append(("list_for_target", target_type, target_id))
        return [
            self._nest(c)
            for c in self._comments.values()
            if c.is_root
            and c.target_type is target_type
            and c.target_id == target_id
            and c.status is CommentStatus.APPROVED
        ]

    async def admin_list(
        self, status: StatusFilter, page: int, per_page: int
    ) -> Page[Comment]:
        """Fetch one page of every comment matching the status."""
        self.calls.append(("admin_list", status, page, per_page))
        items = [c for c in self._comments.values() if self._matches(c, status)]
        return self._paginate(items, page, per_page)

    async def replies_of(
        self,
        comment_id: CommentId,
        status: StatusFilter,
        page: int,
        per_page: int,
    ) -> Page[Comment]:
        """Fetch one page of the direct replies of a comment."""
        self.calls.append(("replies_of", comment_id, status, page, per_page))
        self._require(comment_id)
        items = [c for c in self._children(comment_id) if self._matches(c, status)]
        return self._paginate(items, page, per_page)

    async def create(
        self,
        target_type: TargetType,
        target_id: TargetId,
        body: str,
        rating: Optional[int] = None,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a pending comment, enforcing the reply depth limit."""
        self.calls.append(("create", target_type, target_id, parent_id))
        if parent_id is not None:
            parent = self._require(parent_id)
            if self._depth(parent) + 1 > self.max_depth:
                raise CommentApiError("Reply depth limit reached", status_code=422)
        return self._insert(
            parent_id=parent_id,
            target_type=target_type,
            target_id=target_id,
            body=body,
            rating=rating,
            status=CommentStatus.PENDING,
        )

    async def reply_as_moderator(self, comment_id: CommentId, body: str) -> Comment:
        """Create an approved reply under a comment."""
        self.calls.append(("reply_as_moderator", comment_id))
        parent = self._require(comment_id)
        if self._depth(parent) + 1 > self.max_depth:
            raise CommentApiError("Reply depth limit reached", status_code=422)
        return self._insert(
            parent_id=comment_id,
            target_type=parent.target_type,
            target_id=parent.target_id,
            body=body,
            rating=None,
            status=CommentStatus.APPROVED,
        )

    async def approve(self, comment_id: CommentId) -> None:
        self.calls.append(("approve", comment_id))
        comment = self._require(comment_id)
        self._comments[comment_id] = comment.model_copy(
            update={"status": CommentStatus.APPROVED}
        )

    async def reject(self, comment_id: CommentId) -> None:
        self.calls.append(("reject", comment_id))
        comment = self._require(comment_id)
        self._comments[comment_id] = comment.model_copy(
            update={"status": CommentStatus.REJECTED}
        )

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its replies."""
        self.calls.append(("delete", comment_id))
        self._require(comment_id)
        pending = [comment_id]
        while pending:
            current = pending.pop()
            self._comments.pop(current, None)
            pending.extend(c.id for c in self._children(current))

    def _insert(self, **fields) -> Comment:
        comment = Comment(
            id=CommentId(str(self._next_id)),
            created_at=datetime.now(),
            **fields,
        )
        self._next_id += 1
        self._comments[comment.id] = comment
        return comment
