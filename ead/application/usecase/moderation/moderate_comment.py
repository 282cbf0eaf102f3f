"""Moderate comment use case."""

from pydantic import BaseModel

from ead.domain.service import DEFAULT_SESSION, ModerationService
from ead.domain.value import CommentId, ModerationAction

_MESSAGES = {
    ModerationAction.APPROVE: "Comment approved",
    ModerationAction.REJECT: "Comment rejected",
    ModerationAction.DELETE: "Comment deleted",
}


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str
    action: ModerationAction
    session: str = DEFAULT_SESSION


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    comment_id: str
    action: ModerationAction
    message: str


class ModerateCommentUseCase:
    """Use case for approving, rejecting or deleting a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderate comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderate comment flow.

        Raises:
            InvalidTransitionError: If the comment is no longer pending
        """
        await self.moderation_service.moderate(
            CommentId(request.comment_id), request.action, session=request.session
        )
        return ModerateCommentResponse(
            comment_id=request.comment_id,
            action=request.action,
            message=_MESSAGES[request.action],
        )
