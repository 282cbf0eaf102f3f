"""Unit tests for CreateCommentUseCase."""

import pytest

from ead.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from ead.domain.error import PolicyViolationError
from ead.domain.value import TargetType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_created_comment_is_pending(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                target_type=TargetType.COURSE,
                target_id="3",
                body="Excellent course",
                rating=5,
            )
        )

        # Assert
        assert response.comment.status == "pending"
        assert response.comment.status_label == "Pending"
        assert response.comment.target_type == "course"
        assert response.comment.rating == 5
        assert response.message == "Comment submitted for moderation"

    @pytest.mark.asyncio
    async def test_policy_rejection_propagates(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(PolicyViolationError):
            await use_case.execute(
                CreateCommentRequest(
                    target_type=TargetType.COURSE, target_id="3", body="hi", rating=5
                )
            )
