"""Get target thread use case."""

from pydantic import BaseModel

from ead.application.usecase.thread import ThreadNodeResponse, root_thread
from ead.domain.service import CommentService, StatusTranslator
from ead.domain.value import TargetId, TargetType


class GetTargetThreadRequest(BaseModel):
    """Get target thread request."""

    target_type: TargetType
    target_id: str


class GetTargetThreadResponse(BaseModel):
    """Get target thread response."""

    target_type: TargetType
    target_id: str
    threads: list[ThreadNodeResponse]
    total: int
    orphans: int


class GetTargetThreadUseCase:
    """Use case for showing the approved comment thread of a course or activity."""

    def __init__(
        self, comment_service: CommentService, translator: StatusTranslator
    ) -> None:
        """Initialize get target thread use case.

        Args:
            comment_service: Comment domain service
            translator: Status label translator
        """
        self.comment_service = comment_service
        self.translator = translator

    async def execute(self, request: GetTargetThreadRequest) -> GetTargetThreadResponse:
        """Execute get target thread flow.

        Args:
            request: Target to load

        Returns:
            One nested thread per root comment, in backend order
        """
        forest = await self.comment_service.get_thread(
            request.target_type, TargetId(request.target_id)
        )
        builder = self.comment_service.builder
        max_reply_depth = self.comment_service.policy.max_depth

        threads = [
            root_thread(
                root,
                builder.thread_under(forest, root.id),
                forest,
                self.translator,
                max_reply_depth,
            )
            for root in forest.roots
        ]
        return GetTargetThreadResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            threads=threads,
            total=len(forest) - len(forest.orphans),
            orphans=len(forest.orphans),
        )
