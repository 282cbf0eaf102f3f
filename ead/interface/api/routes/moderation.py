"""Moderation panel routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from ead.adapter.error import CommentApiError
from ead.application.usecase.moderation import (
    ListModerationQueueRequest,
    ListModerationQueueResponse,
    ListModerationQueueUseCase,
    LoadFullThreadRequest,
    LoadFullThreadResponse,
    LoadFullThreadUseCase,
    LoadTargetCommentsRequest,
    LoadTargetCommentsResponse,
    LoadTargetCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
    ReplyAsModeratorRequest,
    ReplyAsModeratorResponse,
    ReplyAsModeratorUseCase,
)
from ead.domain.error import DomainError
from ead.domain.service import MODERATION_VIEW, target_view
from ead.domain.value import ModerationAction, StatusFilter, TargetType
from ead.interface.error import UnsupportedActionError, to_http_exception

router = APIRouter(prefix="/moderation", tags=["moderation"], route_class=DishkaRoute)

_STATUS_ACTIONS = (ModerationAction.APPROVE.value, ModerationAction.REJECT.value)

# Opaque id chosen by the moderation client; thread caches belong to it
ModerationSession = Annotated[
    str, Header(alias="X-Moderation-Session", min_length=1, max_length=128)
]


class ReplyAPIRequest(BaseModel):
    """API request for a moderator reply."""

    body: str = Field(max_length=10000)
    view: str = MODERATION_VIEW


@router.get("/comments", response_model=ListModerationQueueResponse)
async def list_queue(
    use_case: FromDishka[ListModerationQueueUseCase],
    session: ModerationSession,
    status: StatusFilter = StatusFilter.PENDING,
    page: int = Query(default=1, ge=1),
    per_page: int | None = Query(default=None, ge=1, le=100),
    search: str | None = None,
) -> ListModerationQueueResponse:
    """List one page of comments awaiting moderation.

    Args:
        use_case: List moderation queue use case from DI
        session: Client session owning the thread caches
        status: Status filter (``all`` for every comment)
        page: 1-based page number
        per_page: Page size
        search: Filter on body and author name

    Returns:
        Root rows with their replies nested
    """
    try:
        return await use_case.execute(
            ListModerationQueueRequest(
                status=status,
                page=page,
                per_page=per_page,
                search=search,
                session=session,
            )
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)


@router.get(
    "/targets/{target_type}/{target_id}/comments",
    response_model=LoadTargetCommentsResponse,
)
async def list_target_comments(
    target_type: TargetType,
    target_id: str,
    use_case: FromDishka[LoadTargetCommentsUseCase],
    session: ModerationSession,
    status: StatusFilter = StatusFilter.ALL,
) -> LoadTargetCommentsResponse:
    """List every comment of one course or activity for moderation.

    Returns:
        Nested threads of the target
    """
    try:
        return await use_case.execute(
            LoadTargetCommentsRequest(
                target_type=target_type,
                target_id=target_id,
                status=status,
                session=session,
            )
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)


@router.get("/comments/{comment_id}/thread", response_model=LoadFullThreadResponse)
async def load_full_thread(
    comment_id: str,
    use_case: FromDishka[LoadFullThreadUseCase],
    session: ModerationSession,
    view: str = MODERATION_VIEW,
    target_type: TargetType | None = None,
    target_id: str | None = None,
    status: StatusFilter = StatusFilter.ALL,
) -> LoadFullThreadResponse:
    """Load every reply of a comment.

    The thread is loaded into the moderation queue view unless a target is
    given, in which case it goes to that target's view. Loads only supersede
    earlier loads of the same client session.

    Returns:
        Replies nested under the comment

    Raises:
        HTTPException: 409 if a newer load superseded this one
    """
    if target_type is not None and target_id is not None:
        view = target_view(target_type, target_id)
    try:
        return await use_case.execute(
            LoadFullThreadRequest(
                comment_id=comment_id, view=view, status=status, session=session
            )
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)


@router.post(
    "/comments/{comment_id}/reply",
    response_model=ReplyAsModeratorResponse,
    status_code=201,
)
async def reply_as_moderator(
    comment_id: str,
    request: ReplyAPIRequest,
    use_case: FromDishka[ReplyAsModeratorUseCase],
    session: ModerationSession,
) -> ReplyAsModeratorResponse:
    """Publish a moderator reply under a comment.

    Raises:
        HTTPException: 422 with the rejection reason when the moderator
            policy refuses the text
    """
    try:
        return await use_case.execute(
            ReplyAsModeratorRequest(
                comment_id=comment_id,
                body=request.body,
                view=request.view,
                session=session,
            )
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)


@router.post(
    "/comments/{comment_id}/{action}", response_model=ModerateCommentResponse
)
async def moderate_comment(
    comment_id: str,
    action: str,
    use_case: FromDishka[ModerateCommentUseCase],
    session: ModerationSession,
) -> ModerateCommentResponse:
    """Approve or reject a comment.

    Raises:
        HTTPException: 404 for any action other than approve or reject, 409
            if the comment is no longer pending
    """
    try:
        if action not in _STATUS_ACTIONS:
            raise UnsupportedActionError(f"Unsupported moderation action: {action}")
        return await use_case.execute(
            ModerateCommentRequest(
                comment_id=comment_id,
                action=ModerationAction(action),
                session=session,
            )
        )
    except (DomainError, CommentApiError, UnsupportedActionError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", response_model=ModerateCommentResponse)
async def delete_comment(
    comment_id: str,
    use_case: FromDishka[ModerateCommentUseCase],
    session: ModerationSession,
) -> ModerateCommentResponse:
    """Delete a comment."""
    try:
        return await use_case.execute(
            ModerateCommentRequest(
                comment_id=comment_id,
                action=ModerationAction.DELETE,
                session=session,
            )
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)
