"""Load full thread use case."""

from pydantic import BaseModel

from ead.application.usecase.thread import ThreadNodeResponse, nest_nodes
from ead.domain.model import CommentForest
from ead.domain.service import (
    DEFAULT_SESSION,
    MODERATION_VIEW,
    ModerationService,
    StatusTranslator,
)
from ead.domain.value import CommentId, StatusFilter


class LoadFullThreadRequest(BaseModel):
    """Load full thread request."""

    comment_id: str
    view: str = MODERATION_VIEW
    status: StatusFilter = StatusFilter.ALL
    session: str = DEFAULT_SESSION


class LoadFullThreadResponse(BaseModel):
    """Load full thread response."""

    comment_id: str
    replies: list[ThreadNodeResponse]
    total: int


class LoadFullThreadUseCase:
    """Use case for loading every reply of a comment into a moderation view."""

    def __init__(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> None:
        """Initialize load full thread use case.

        Args:
            moderation_service: Moderation domain service
            translator: Status label translator
        """
        self.moderation_service = moderation_service
        self.translator = translator

    async def execute(self, request: LoadFullThreadRequest) -> LoadFullThreadResponse:
        """Execute load full thread flow.

        Args:
            request: Comment and the view it is shown in

        Returns:
            Replies under the comment, merged with what the view already had

        Raises:
            FetchAbortedError: If another load superseded this one
        """
        comment_id = CommentId(request.comment_id)
        nodes = await self.moderation_service.load_full_thread(
            comment_id,
            view=request.view,
            status=request.status,
            session=request.session,
        )
        cache = self.moderation_service.caches.get(request.view, request.session)
        forest = CommentForest(children_by_parent=cache.merged())

        return LoadFullThreadResponse(
            comment_id=request.comment_id,
            replies=nest_nodes(
                nodes,
                forest,
                self.translator,
                self.moderation_service.policy.max_depth,
            ),
            total=len(nodes),
        )
