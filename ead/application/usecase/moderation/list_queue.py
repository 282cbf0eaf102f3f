"""List moderation queue use case."""

from pydantic import BaseModel, Field

from ead.application.usecase.thread import ThreadNodeResponse, root_thread
from ead.domain.model import CommentForest
from ead.domain.service import DEFAULT_SESSION, ModerationService, StatusTranslator
from ead.domain.value import StatusFilter


class ListModerationQueueRequest(BaseModel):
    """List moderation queue request."""

    status: StatusFilter = StatusFilter.PENDING
    page: int = Field(default=1, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100)
    search: str | None = None
    session: str = DEFAULT_SESSION


class ListModerationQueueResponse(BaseModel):
    """List moderation queue response."""

    status: StatusFilter
    items: list[ThreadNodeResponse]
    current_page: int
    last_page: int
    total: int | None


class ListModerationQueueUseCase:
    """Use case for one page of the moderation table.

    Rows are the root comments of the page. Replies found on the same page,
    and threads already loaded in full, are nested under their root.
    """

    def __init__(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> None:
        """Initialize list moderation queue use case.

        Args:
            moderation_service: Moderation domain service
            translator: Status label translator
        """
        self.moderation_service = moderation_service
        self.translator = translator

    async def execute(
        self, request: ListModerationQueueRequest
    ) -> ListModerationQueueResponse:
        """Execute list moderation queue flow.

        Args:
            request: Status filter, page and optional search text

        Returns:
            Root rows with nested replies and pagination info
        """
        queue = await self.moderation_service.queue_page(
            status=request.status,
            page=request.page,
            per_page=request.per_page,
            search=request.search,
            session=request.session,
        )
        forest = CommentForest(children_by_parent=queue.reply_map)
        max_reply_depth = self.moderation_service.policy.max_depth

        return ListModerationQueueResponse(
            status=request.status,
            items=[
                root_thread(
                    root,
                    queue.threads[root.id],
                    forest,
                    self.translator,
                    max_reply_depth,
                )
                for root in queue.roots
            ],
            current_page=queue.page.current_page,
            last_page=queue.page.last_page,
            total=queue.page.total,
        )
