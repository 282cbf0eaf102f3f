"""Load target comments use case."""

from pydantic import BaseModel

from ead.application.usecase.thread import ThreadNodeResponse, root_thread
from ead.domain.service import DEFAULT_SESSION, ModerationService, StatusTranslator
from ead.domain.value import StatusFilter, TargetId, TargetType


class LoadTargetCommentsRequest(BaseModel):
    """Load target comments request."""

    target_type: TargetType
    target_id: str
    status: StatusFilter = StatusFilter.ALL
    session: str = DEFAULT_SESSION


class LoadTargetCommentsResponse(BaseModel):
    """Load target comments response."""

    target_type: TargetType
    target_id: str
    threads: list[ThreadNodeResponse]
    total: int
    orphans: int


class LoadTargetCommentsUseCase:
    """Use case for moderating every comment of one course or activity.

    The moderation list has no target filter, so every page is loaded and
    filtered locally.
    """

    def __init__(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> None:
        """Initialize load target comments use case.

        Args:
            moderation_service: Moderation domain service
            translator: Status label translator
        """
        self.moderation_service = moderation_service
        self.translator = translator

    async def execute(
        self, request: LoadTargetCommentsRequest
    ) -> LoadTargetCommentsResponse:
        """Execute load target comments flow.

        Args:
            request: Target and status filter

        Returns:
            One nested thread per root comment of the target
        """
        forest = await self.moderation_service.load_target_comments(
            request.target_type,
            TargetId(request.target_id),
            request.status,
            session=request.session,
        )
        builder = self.moderation_service.builder
        max_reply_depth = self.moderation_service.policy.max_depth

        return LoadTargetCommentsResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            threads=[
                root_thread(
                    root,
                    builder.thread_under(forest, root.id),
                    forest,
                    self.translator,
                    max_reply_depth,
                )
                for root in forest.roots
            ],
            total=len(forest) - len(forest.orphans),
            orphans=len(forest.orphans),
        )
