"""Comment gateway interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ead.domain.model import Comment, Page
from ead.domain.value import CommentId, StatusFilter, TargetId, TargetType


class CommentGateway(ABC):
    """Gateway to the EAD backend comment resources.

    Defines the contract for reading and moderating comments. The backend
    owns the data; implementations live in the adapter layer and return
    normalized ``Comment`` snapshots.
    """

    @abstractmethod
    async def list_for_target(
        self, target_type: TargetType, target_id: TargetId
    ) -> List[Comment]:
        """List the comment thread of a course or activity.

        Roots may carry their replies nested in ``Comment.replies``.

        Args:
            target_type: Course or activity
            target_id: The target's identifier

        Returns:
            Root comments of the target, in backend order
        """
        pass

    @abstractmethod
    async def admin_list(
        self, status: StatusFilter, page: int, per_page: int
    ) -> Page[Comment]:
        """Fetch one page of the moderation list.

        Args:
            status: Status filter
            page: 1-based page number
            per_page: Page size

        Returns:
            The requested page; roots and replies are mixed
        """
        pass

    @abstractmethod
    async def replies_of(
        self,
        comment_id: CommentId,
        status: StatusFilter,
        page: int,
        per_page: int,
    ) -> Page[Comment]:
        """Fetch one page of the replies of a comment.

        Args:
            comment_id: Parent comment ID
            status: Status filter
            page: 1-based page number
            per_page: Page size

        Returns:
            The requested page of replies
        """
        pass

    @abstractmethod
    async def create(
        self,
        target_type: TargetType,
        target_id: TargetId,
        body: str,
        rating: Optional[int] = None,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Create a comment or a reply on behalf of the current user.

        Returns:
            The created comment (usually pending moderation)
        """
        pass

    @abstractmethod
    async def reply_as_moderator(self, comment_id: CommentId, body: str) -> Comment:
        """Post a moderator reply under a comment.

        Returns:
            The created reply
        """
        pass

    @abstractmethod
    async def approve(self, comment_id: CommentId) -> None:
        """Approve a comment."""
        pass

    @abstractmethod
    async def reject(self, comment_id: CommentId) -> None:
        """Reject a comment."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        pass
