"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import logfire

from ead.domain.model import Comment, Page
from ead.domain.value import CommentId, CommentStatus, TargetId, TargetType

# Keep telemetry local; app modules instrument against this configuration
logfire.configure(send_to_logfire=False, console=False)

_EPOCH = datetime(2024, 3, 1, 12, 0, 0)


def make_comment(
    comment_id: str | int,
    parent_id: str | int | None = None,
    body: str | None = None,
    status: CommentStatus = CommentStatus.PENDING,
    target_type: TargetType = TargetType.ACTIVITY,
    target_id: str | int = "7",
    rating: int | None = None,
    author_name: str | None = "Ana Souza",
    replies: tuple[Comment, ...] = (),
    replies_count: int | None = None,
) -> Comment:
    """Helper function to build test comments.

    Roots get a 5-star rating unless one is given; replies get none.
    ``created_at`` grows with the numeric id so ordering is predictable.
    """
    offset = int(comment_id) if str(comment_id).isdigit() else 0
    return Comment(
        id=CommentId(str(comment_id)),
        parent_id=CommentId(str(parent_id)) if parent_id is not None else None,
        target_type=target_type,
        target_id=TargetId(str(target_id)),
        body=body if body is not None else f"Comment number {comment_id}",
        rating=rating if rating is not None else (5 if parent_id is None else None),
        status=status,
        author_name=author_name,
        created_at=_EPOCH + timedelta(minutes=offset),
        replies=replies,
        replies_count=replies_count,
    )


def make_page(
    items: list, current_page: int = 1, last_page: int = 1, total: int | None = None
) -> Page:
    """Helper function to build one page of results."""
    return Page(
        items=items, current_page=current_page, last_page=last_page, total=total
    )
