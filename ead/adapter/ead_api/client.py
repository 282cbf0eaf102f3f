"""EAD backend comment API client.

Talks to the school backend's REST endpoints for comments and moderation and
hands normalized models to the domain layer.
"""

from typing import Any, Optional

import httpx
import logfire

from ead.adapter.ead_api.normalize import (
    normalize_comment,
    normalize_list,
    normalize_page,
)
from ead.adapter.error import CommentApiError
from ead.domain.model import Comment, Page
from ead.domain.repository import CommentGateway
from ead.domain.value import (
    CommentId,
    CommentStatus,
    StatusFilter,
    TargetId,
    TargetType,
)

_TARGET_PATHS = {
    TargetType.COURSE: "courses",
    TargetType.ACTIVITY: "activities",
}


class HttpCommentGateway(CommentGateway):
    """Comment gateway backed by the EAD REST API."""

    def __init__(
        self,
        base_url: str,
        api_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP gateway.

        Args:
            base_url: API base URL, including any version prefix
            api_token: Bearer token sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            CommentApiError: On transport errors, non-2xx responses or
                unreadable bodies
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.request(method, path, params=params, json=json)

                if not response.is_success:
                    logfire.error(
                        "EAD API request failed",
                        method=method,
                        path=path,
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise CommentApiError(
                        f"{method} {path} failed: {response.status_code}",
                        status_code=response.status_code,
                    )

                if response.status_code == 204 or not response.content:
                    return None
                return response.json()

        except httpx.HTTPError as e:
            logfire.error("EAD API HTTP error", method=method, path=path, error=str(e))
            raise CommentApiError(f"HTTP error during {method} {path}: {e}")
        except ValueError as e:
            logfire.error("EAD API returned invalid JSON", method=method, path=path)
            raise CommentApiError(f"Invalid JSON from {method} {path}: {e}")

    async def list_for_target(
        self, target_type: TargetType, target_id: TargetId
    ) -> list[Comment]:
        path = f"/{_TARGET_PATHS[target_type]}/{target_id}/comments"
        # Public thread endpoints only serve approved comments and omit the status
        comments = normalize_list(
            await self._request("GET", path), default_status=CommentStatus.APPROVED
        )
        logfire.info(
            "Target comments fetched",
            target_type=target_type.value,
            target_id=str(target_id),
            count=len(comments),
        )
        return comments

    async def admin_list(
        self, status: StatusFilter, page: int, per_page: int
    ) -> Page[Comment]:
        # The admin list has no "all" value; omitting the filter returns all
        params: dict[str, Any] = {"page": page, "per_page": per_page}
        if status is not StatusFilter.ALL:
            params["status"] = status.value
        return normalize_page(await self._request("GET", "/admin/comments", params))

    async def replies_of(
        self,
        comment_id: CommentId,
        status: StatusFilter,
        page: int,
        per_page: int,
    ) -> Page[Comment]:
        # Backends differ on the page size parameter name; send both
        params = {
            "status": status.value,
            "page": page,
            "per_page": per_page,
            "perPage": per_page,
        }
        raw = await self._request("GET", f"/comments/{comment_id}/replies", params)
        return normalize_page(raw, parent_id=comment_id)

    async def create(
        self,
        target_type: TargetType,
        target_id: TargetId,
        body: str,
        rating: Optional[int] = None,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        payload: dict[str, Any] = {
            "target_type": target_type.value,
            "target_id": _id_value(target_id),
            "body": body,
            "rating": rating,
            "parent_id": _id_value(parent_id) if parent_id is not None else None,
        }
        raw = await self._request("POST", "/comments", json=payload)
        created = _created_record(raw)
        return normalize_comment(
            {
                "status": CommentStatus.PENDING.value,
                "commentable_type": target_type.value,
                "commentable_id": target_id,
                **payload,
                **created,
            }
        )

    async def reply_as_moderator(self, comment_id: CommentId, body: str) -> Comment:
        raw = await self._request(
            "POST", f"/admin/comments/{comment_id}/reply", json={"body": body}
        )
        created = _created_record(raw)
        return normalize_comment(
            {
                "status": CommentStatus.APPROVED.value,
                "body": body,
                "parent_id": comment_id,
                **created,
            }
        )

    async def approve(self, comment_id: CommentId) -> None:
        await self._request("POST", f"/admin/comments/{comment_id}/approve")
        logfire.info("Comment approved on backend", comment_id=str(comment_id))

    async def reject(self, comment_id: CommentId) -> None:
        await self._request("POST", f"/admin/comments/{comment_id}/reject")
        logfire.info("Comment rejected on backend", comment_id=str(comment_id))

    async def delete(self, comment_id: CommentId) -> None:
        await self._request("DELETE", f"/admin/comments/{comment_id}")
        logfire.info("Comment deleted on backend", comment_id=str(comment_id))


def _created_record(raw: Any) -> dict[str, Any]:
    """Extract the created record from a ``{message, data}`` response.

    Raises:
        CommentApiError: If the response carries no comment id
    """
    record = raw.get("data") if isinstance(raw, dict) else None
    if not isinstance(record, dict):
        record = raw if isinstance(raw, dict) else {}
    if record.get("id") is None:
        raise CommentApiError("Backend response did not include the created comment")
    return record


def _id_value(identifier: str) -> int | str:
    # The backend validates numeric ids as integers
    return int(identifier) if str(identifier).isdigit() else identifier
