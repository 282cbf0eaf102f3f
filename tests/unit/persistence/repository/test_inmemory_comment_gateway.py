"""Unit tests for the in-memory comment gateway."""

import pytest

from ead.adapter.error import CommentApiError
from ead.domain.value import (
    CommentId,
    CommentStatus,
    StatusFilter,
    TargetId,
    TargetType,
)
from ead.persistence.repository.inmemory import InMemoryCommentGateway
from tests.conftest import make_comment

APPROVED = CommentStatus.APPROVED


class TestInMemoryCommentGateway:
    """Backend behaviours the services rely on."""

    @pytest.mark.asyncio
    async def test_public_list_nests_approved_replies(self):
        """Public lists nest approved replies and drop their parent_id."""
        # Arrange
        gateway = InMemoryCommentGateway()
        gateway.add(make_comment(1, status=APPROVED))
        gateway.add(make_comment(2, parent_id=1, status=APPROVED))
        gateway.add(make_comment(3, parent_id=1))

        # Act
        roots = await gateway.list_for_target(TargetType.ACTIVITY, TargetId("7"))

        # Assert
        assert [c.id for c in roots] == ["1"]
        assert [c.id for c in roots[0].replies] == ["2"]
        assert roots[0].replies[0].parent_id is None

    @pytest.mark.asyncio
    async def test_replies_of_lists_direct_children(self):
        gateway = InMemoryCommentGateway()
        gateway.add(make_comment(1))
        gateway.add(make_comment(2, parent_id=1))
        gateway.add(make_comment(3, parent_id=2))

        page = await gateway.replies_of(CommentId("1"), StatusFilter.ALL, 1, 10)

        assert [c.id for c in page.items] == ["2"]

    @pytest.mark.asyncio
    async def test_unknown_comment_is_404(self):
        gateway = InMemoryCommentGateway()

        with pytest.raises(CommentApiError) as exc_info:
            await gateway.approve(CommentId("9"))

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_depth_limit_is_422(self):
        gateway = InMemoryCommentGateway(max_depth=1)
        gateway.add(make_comment(1))
        gateway.add(make_comment(2, parent_id=1))

        with pytest.raises(CommentApiError) as exc_info:
            await gateway.create(
                TargetType.ACTIVITY, TargetId("7"), "Too deep", parent_id=CommentId("2")
            )

        assert exc_info.value.status_code == 422

    @pytest.mark.asyncio
    async def test_ids_continue_after_seeded_comments(self):
        gateway = InMemoryCommentGateway()
        gateway.add(make_comment(10))

        created = await gateway.create(
            TargetType.ACTIVITY, TargetId("7"), "New one", rating=3
        )

        assert created.id == "11"
        assert created.status is CommentStatus.PENDING

    @pytest.mark.asyncio
    async def test_delete_removes_descendants(self):
        gateway = InMemoryCommentGateway()
        gateway.add(make_comment(1))
        gateway.add(make_comment(2, parent_id=1))
        gateway.add(make_comment(3, parent_id=2))

        await gateway.delete(CommentId("1"))

        assert gateway.get(CommentId("3")) is None
