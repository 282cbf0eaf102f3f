"""Comment domain service."""

import logfire

from ead.domain.error import NotFoundError, PolicyViolationError
from ead.domain.model import Comment, CommentForest
from ead.domain.repository import CommentGateway
from ead.domain.value import CommentId, TargetId, TargetType

from .base import Service
from .reply_policy import ReplyPolicy
from .thread_builder import ThreadBuilder


class CommentService(Service):
    """Domain service for the student-facing comment thread."""

    def __init__(
        self,
        gateway: CommentGateway,
        builder: ThreadBuilder,
        policy: ReplyPolicy,
    ) -> None:
        """Initialize comment service.

        Args:
            gateway: Backend comment gateway
            builder: Thread builder
            policy: Student reply policy
        """
        self.gateway = gateway
        self.builder = builder
        self.policy = policy

    async def get_thread(
        self, target_type: TargetType, target_id: TargetId
    ) -> CommentForest:
        """Load and build the comment thread of a course or activity.

        Args:
            target_type: Course or activity
            target_id: Target identifier

        Returns:
            Forest of the target's comments
        """
        with self.span(
            "get_thread",
            target_type=target_type.value,
            target_id=str(target_id),
        ):
            records = await self.gateway.list_for_target(target_type, target_id)
            forest = self.builder.build(records)
            logfire.info(
                "Thread loaded for target",
                target_type=target_type.value,
                target_id=str(target_id),
                roots=len(forest.roots),
                comments=len(forest),
            )
            return forest

    async def create_comment(
        self,
        target_type: TargetType,
        target_id: TargetId,
        body: str,
        rating: int | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a target or reply to another comment.

        The text is checked against the reply policy first, then the rating:
        roots need one from 1 to 5 and replies carry none. For replies the
        parent must be part of the target's thread; its depth there decides
        whether one more level is allowed.

        Args:
            target_type: Course or activity
            target_id: Target identifier
            body: Comment text as typed
            rating: Star rating (roots only)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment as reported by the backend

        Raises:
            PolicyViolationError: If the text or rating is refused
            NotFoundError: If the parent is not in the target's thread
        """
        with self.span(
            "create_comment",
            target_type=target_type.value,
            target_id=str(target_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            depth = 0
            if parent_id is not None:
                forest = await self.get_thread(target_type, target_id)
                parent_depth = forest.depth_of(parent_id, self.builder.max_depth)
                if parent_depth is None:
                    logfire.error(
                        "Parent comment not found in target thread",
                        parent_id=str(parent_id),
                        target_id=str(target_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                depth = parent_depth

            result = self.policy.validate(body, depth)
            if not result.accepted:
                logfire.warn(
                    "Comment refused by reply policy",
                    reason=result.reason.value,
                    depth=depth,
                )
                raise PolicyViolationError(result)

            rating_rejection = self.policy.validate_rating(
                rating, is_root=parent_id is None
            )
            if rating_rejection:
                logfire.warn(
                    "Comment refused by rating check",
                    reason=rating_rejection.reason.value,
                )
                raise PolicyViolationError(rating_rejection)

            created = await self.gateway.create(
                target_type=target_type,
                target_id=target_id,
                body=result.text,
                rating=rating,
                parent_id=parent_id,
            )
            logfire.info(
                "Comment created",
                comment_id=str(created.id),
                target_id=str(target_id),
                depth=depth + 1 if parent_id else 0,
                status=created.status.value,
            )
            return created
