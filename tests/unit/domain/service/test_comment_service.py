"""Unit tests for CommentService."""

import pytest

from ead.domain.error import NotFoundError, PolicyViolationError
from ead.domain.repository import CommentGateway
from ead.domain.service import CommentService, RejectionReason
from ead.domain.value import CommentId, CommentStatus, TargetId, TargetType
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

ACTIVITY = TargetType.ACTIVITY
APPROVED = CommentStatus.APPROVED


async def seed_chain(gateway, length: int):
    """Seed an approved root (id 1) with a reply chain 2 -> 3 -> ... below it."""
    gateway.add(make_comment(1, status=APPROVED))
    for i in range(2, length + 1):
        gateway.add(make_comment(i, parent_id=i - 1, status=APPROVED))


class TestGetThread:
    """Tests for get_thread method."""

    @pytest.mark.asyncio
    async def test_builds_thread_from_nested_records(self, unit_env):
        """Approved roots and nested approved replies form the thread."""
        # Arrange
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)
        gateway.add(make_comment(1, status=APPROVED))
        gateway.add(make_comment(2, status=APPROVED))
        gateway.add(make_comment(3, parent_id=1, status=APPROVED))
        gateway.add(make_comment(4, parent_id=3, status=APPROVED))
        gateway.add(make_comment(5, parent_id=1))  # pending, hidden
        gateway.add(make_comment(6, target_id="8", status=APPROVED))

        # Act
        forest = await service.get_thread(ACTIVITY, TargetId("7"))

        # Assert
        assert [c.id for c in forest.roots] == ["1", "2"]
        assert [c.id for c in forest.children_of(CommentId("1"))] == ["3"]
        assert [c.id for c in forest.children_of(CommentId("3"))] == ["4"]
        assert forest.depth_of(CommentId("4")) == 2


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_root_comment_is_pending(self, unit_env):
        """A valid rated root is created pending moderation."""
        # Arrange
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)

        # Act
        created = await service.create_comment(
            ACTIVITY, TargetId("7"), "  Loved this activity  ", rating=5
        )

        # Assert
        assert created.status is CommentStatus.PENDING
        assert created.body == "Loved this activity"
        assert created.rating == 5
        assert gateway.get(created.id) is not None

    @pytest.mark.asyncio
    async def test_root_requires_rating(self, unit_env):
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)

        with pytest.raises(PolicyViolationError) as exc_info:
            await service.create_comment(ACTIVITY, TargetId("7"), "No stars here")

        assert exc_info.value.rejection.reason is RejectionReason.RATING_REQUIRED
        assert not any(call[0] == "create" for call in gateway.calls)

    @pytest.mark.asyncio
    async def test_short_text_never_reaches_backend(self, unit_env):
        """Policy rejections happen before any write."""
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)

        with pytest.raises(PolicyViolationError) as exc_info:
            await service.create_comment(ACTIVITY, TargetId("7"), "hi", rating=4)

        assert exc_info.value.rejection.reason is RejectionReason.TOO_SHORT
        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_reply_within_depth(self, unit_env):
        """Replying to a depth 2 comment is allowed (reply lands at 3)."""
        # Arrange
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)
        await seed_chain(gateway, 3)

        # Act
        created = await service.create_comment(
            ACTIVITY, TargetId("7"), "I agree with you", parent_id=CommentId("3")
        )

        # Assert
        assert created.parent_id == "3"
        assert created.rating is None

    @pytest.mark.asyncio
    async def test_reply_past_depth_limit(self, unit_env):
        """Replying to a depth 3 comment is refused before the backend."""
        # Arrange
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)
        await seed_chain(gateway, 4)

        # Act
        with pytest.raises(PolicyViolationError) as exc_info:
            await service.create_comment(
                ACTIVITY, TargetId("7"), "Going deeper", parent_id=CommentId("4")
            )

        # Assert
        assert exc_info.value.rejection.reason is RejectionReason.DEPTH_EXCEEDED
        assert not any(call[0] == "create" for call in gateway.calls)

    @pytest.mark.asyncio
    async def test_reply_cannot_be_rated(self, unit_env):
        service = await unit_env.get(CommentService)
        gateway = await unit_env.get(CommentGateway)
        await seed_chain(gateway, 1)

        with pytest.raises(PolicyViolationError) as exc_info:
            await service.create_comment(
                ACTIVITY, TargetId("7"), "Five stars", rating=5, parent_id=CommentId("1")
            )

        assert exc_info.value.rejection.reason is RejectionReason.RATING_NOT_ALLOWED

    @pytest.mark.asyncio
    async def test_reply_to_unknown_parent(self, unit_env):
        """Parents outside the target's thread are not found."""
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.create_comment(
                ACTIVITY, TargetId("7"), "Hello there", parent_id=CommentId("99")
            )

    @pytest.mark.asyncio
    async def test_profanity_refused(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(PolicyViolationError) as exc_info:
            await service.create_comment(
                ACTIVITY, TargetId("7"), "you are an idiot", rating=1
            )

        assert exc_info.value.rejection.reason is RejectionReason.PROFANITY
