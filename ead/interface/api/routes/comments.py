"""Comment thread routes for course and activity pages."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from ead.adapter.error import CommentApiError
from ead.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetTargetThreadRequest,
    GetTargetThreadResponse,
    GetTargetThreadUseCase,
)
from ead.domain.error import DomainError
from ead.domain.value import TargetType
from ead.interface.error import to_http_exception

router = APIRouter(prefix="/targets", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    # Length and profanity are checked by the reply policy
    body: str = Field(max_length=10000)
    rating: int | None = None
    parent_id: str | None = None  # Parent comment ID for replies


@router.get(
    "/{target_type}/{target_id}/thread", response_model=GetTargetThreadResponse
)
async def get_target_thread(
    target_type: TargetType,
    target_id: str,
    use_case: FromDishka[GetTargetThreadUseCase],
) -> GetTargetThreadResponse:
    """Get the approved comment thread of a course or activity.

    Args:
        target_type: ``course`` or ``activity``
        target_id: Target identifier
        use_case: Get target thread use case from DI

    Returns:
        Nested threads with depth, labels and reply permissions
    """
    try:
        return await use_case.execute(
            GetTargetThreadRequest(target_type=target_type, target_id=target_id)
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)


@router.post(
    "/{target_type}/{target_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    target_type: TargetType,
    target_id: str,
    request: CreateCommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a target or reply to a comment in its thread.

    Args:
        target_type: ``course`` or ``activity``
        target_id: Target identifier
        request: Comment body, rating (roots) and parent (replies)
        use_case: Create comment use case from DI

    Returns:
        The created comment

    Raises:
        HTTPException: 422 with the rejection reason when the policy refuses
            the comment
    """
    try:
        return await use_case.execute(
            CreateCommentRequest(
                target_type=target_type,
                target_id=target_id,
                body=request.body,
                rating=request.rating,
                parent_id=request.parent_id,
            )
        )
    except (DomainError, CommentApiError) as e:
        raise to_http_exception(e)
