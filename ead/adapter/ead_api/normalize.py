"""Normalization of raw backend payloads into domain models.

Backend endpoints are not consistent about field names: pagination may use
``data`` or ``items``, authors come under half a dozen keys, and nested
replies omit their ``parent_id``. Everything past this module only sees
``Comment`` and ``Page``.
"""

from datetime import datetime
from typing import Any, Optional

from ead.domain.model import Comment, Page
from ead.domain.value import CommentId, CommentStatus, TargetId, TargetType

_AUTHOR_KEYS = ("author_name", "authorName", "user_name", "user_full_name")
_USER_AUTHOR_KEYS = ("full_name", "name", "nome")


def normalize_comment(
    raw: dict[str, Any],
    parent_id: Optional[CommentId] = None,
    default_status: CommentStatus = CommentStatus.PENDING,
) -> Comment:
    """Build a Comment from one backend record.

    Args:
        raw: Backend record
        parent_id: Fallback parent for records that omit theirs (nested
            replies, the replies endpoint)
        default_status: Status for records that omit theirs (the public
            thread endpoints only serve approved comments)

    Returns:
        Normalized comment, with nested replies normalized recursively
    """
    comment_id = CommentId(str(raw.get("id")))
    raw_parent = _first(raw, "parent_id", "parentId")
    resolved_parent = CommentId(str(raw_parent)) if raw_parent is not None else parent_id

    nested = raw.get("replies")
    replies = tuple(
        normalize_comment(child, comment_id, default_status)
        for child in (nested if isinstance(nested, list) else [])
        if isinstance(child, dict)
    )

    raw_target = _first(raw, "commentable_id", "target_id")
    meta = raw.get("meta")

    return Comment(
        id=comment_id,
        parent_id=resolved_parent,
        target_type=TargetType.from_backend(_first(raw, "commentable_type", "target_type")),
        target_id=TargetId(str(raw_target)) if raw_target is not None else None,
        body=str(_first(raw, "body", "text") or ""),
        rating=_rating(raw.get("rating")),
        status=(
            CommentStatus.parse(raw["status"])
            if raw.get("status") is not None
            else default_status
        ),
        user_id=str(raw["user_id"]) if raw.get("user_id") is not None else None,
        author_name=author_name(raw),
        created_at=_datetime(raw.get("created_at")),
        replies_count=_count(_first(raw, "total_replies", "replies_count")),
        replies=replies,
        meta=meta if isinstance(meta, dict) else None,
    )


def author_name(raw: dict[str, Any]) -> Optional[str]:
    """First non-empty author name among the known fields."""
    for key in _AUTHOR_KEYS:
        value = raw.get(key)
        if value:
            return str(value)
    user = raw.get("user")
    if isinstance(user, dict):
        for key in _USER_AUTHOR_KEYS:
            value = user.get(key)
            if value:
                return str(value)
    return None


def normalize_page(
    raw: Any, parent_id: Optional[CommentId] = None
) -> Page[Comment]:
    """Build a Page from a paginated payload.

    A bare list is treated as a single complete page.
    """
    if isinstance(raw, list):
        items = _comments(raw, parent_id)
        return Page[Comment](items=items, current_page=1, last_page=1, total=len(items))

    payload = raw if isinstance(raw, dict) else {}
    records = _first(payload, "data", "items")
    items = _comments(records if isinstance(records, list) else [], parent_id)
    current = _positive(_first(payload, "current_page", "page"), default=1)
    last = _positive(_first(payload, "last_page", "total_pages"), default=1)
    total = payload.get("total")
    return Page[Comment](
        items=items,
        current_page=current,
        last_page=last,
        total=int(total) if isinstance(total, (int, float)) else None,
    )


def normalize_list(
    raw: Any, default_status: CommentStatus = CommentStatus.PENDING
) -> list[Comment]:
    """Build a comment list from a bare list or a ``{data: [...]}`` payload."""
    if isinstance(raw, dict):
        raw = raw.get("data")
    return _comments(raw if isinstance(raw, list) else [], None, default_status)


def _comments(
    records: list,
    parent_id: Optional[CommentId],
    default_status: CommentStatus = CommentStatus.PENDING,
) -> list[Comment]:
    return [
        normalize_comment(record, parent_id, default_status)
        for record in records
        if isinstance(record, dict) and record.get("id") is not None
    ]


def _first(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _rating(value: Any) -> Optional[int]:
    try:
        rating = int(value)
    except (TypeError, ValueError):
        return None
    return rating if 1 <= rating <= 5 else None


def _count(value: Any) -> Optional[int]:
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    return count if count >= 0 else None


def _positive(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def _datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
