"""Reply as moderator use case."""

from pydantic import BaseModel

from ead.application.usecase.thread import CommentItem, comment_item
from ead.domain.service import (
    DEFAULT_SESSION,
    MODERATION_VIEW,
    ModerationService,
    StatusTranslator,
)
from ead.domain.value import CommentId


class ReplyAsModeratorRequest(BaseModel):
    """Reply as moderator request."""

    comment_id: str
    body: str
    view: str = MODERATION_VIEW
    session: str = DEFAULT_SESSION


class ReplyAsModeratorResponse(BaseModel):
    """Reply as moderator response."""

    reply: CommentItem


class ReplyAsModeratorUseCase:
    """Use case for publishing a moderator reply (approved immediately)."""

    def __init__(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> None:
        """Initialize reply as moderator use case.

        Args:
            moderation_service: Moderation domain service
            translator: Status label translator
        """
        self.moderation_service = moderation_service
        self.translator = translator

    async def execute(
        self, request: ReplyAsModeratorRequest
    ) -> ReplyAsModeratorResponse:
        """Execute reply as moderator flow.

        Raises:
            PolicyViolationError: If the moderator policy refuses the text
        """
        reply = await self.moderation_service.reply(
            CommentId(request.comment_id),
            request.body,
            view=request.view,
            session=request.session,
        )
        return ReplyAsModeratorResponse(reply=comment_item(reply, self.translator))
