"""Create comment use case."""

from pydantic import BaseModel

from ead.application.usecase.thread import CommentItem, comment_item
from ead.domain.service import CommentService, StatusTranslator
from ead.domain.value import CommentId, TargetId, TargetType


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    target_type: TargetType
    target_id: str
    body: str
    rating: int | None = None  # Required for top-level comments
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    message: str


class CreateCommentUseCase:
    """Use case for commenting on a target or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, translator: StatusTranslator
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            translator: Status label translator
        """
        self.comment_service = comment_service
        self.translator = translator

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment, usually pending moderation

        Raises:
            PolicyViolationError: If the text or rating is refused
            NotFoundError: If the parent comment is not in the target's thread
        """
        comment = await self.comment_service.create_comment(
            target_type=request.target_type,
            target_id=TargetId(request.target_id),
            body=request.body,
            rating=request.rating,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        return CreateCommentResponse(
            comment=comment_item(comment, self.translator),
            message="Comment submitted for moderation",
        )
