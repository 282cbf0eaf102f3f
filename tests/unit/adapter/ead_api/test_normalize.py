"""Unit tests for backend payload normalization."""

from datetime import datetime, timezone

from ead.adapter.ead_api import (
    author_name,
    normalize_comment,
    normalize_list,
    normalize_page,
)
from ead.domain.value import CommentStatus, TargetType


class TestNormalizeComment:
    """Tests for normalize_comment."""

    def test_admin_record(self):
        """A full admin list record maps onto every field."""
        # Arrange
        raw = {
            "id": 12,
            "parent_id": None,
            "commentable_type": "App\\Models\\Activity",
            "commentable_id": 7,
            "body": "Very clear video",
            "rating": 4,
            "status": "approved",
            "user_id": 30,
            "user": {"id": 30, "name": "Ana Souza"},
            "created_at": "2024-03-01T12:00:00Z",
            "total_replies": 2,
        }

        # Act
        comment = normalize_comment(raw)

        # Assert
        assert comment.id == "12"
        assert comment.parent_id is None
        assert comment.target_type is TargetType.ACTIVITY
        assert comment.target_id == "7"
        assert comment.rating == 4
        assert comment.status is CommentStatus.APPROVED
        assert comment.user_id == "30"
        assert comment.author_name == "Ana Souza"
        assert comment.created_at == datetime(2024, 3, 1, 12, tzinfo=timezone.utc)
        assert comment.replies_count == 2

    def test_nested_replies_inherit_owner(self):
        """Nested replies without parent_id get their owner's id."""
        raw = {
            "id": 1,
            "body": "Root",
            "replies": [{"id": 2, "body": "Child", "replies": [{"id": 3}]}],
        }

        comment = normalize_comment(raw, default_status=CommentStatus.APPROVED)

        child = comment.replies[0]
        assert child.parent_id == "1"
        assert child.replies[0].parent_id == "2"
        assert child.status is CommentStatus.APPROVED

    def test_unknown_values_are_tolerated(self):
        """Bad ratings, dates and statuses fall back to safe values."""
        raw = {
            "id": "9",
            "rating": 11,
            "created_at": "yesterday",
            "status": "archived",
            "commentable_type": "Forum",
            "text": "Legacy body field",
        }

        comment = normalize_comment(raw)

        assert comment.rating is None
        assert comment.created_at is None
        assert comment.status is CommentStatus.PENDING
        assert comment.target_type is None
        assert comment.body == "Legacy body field"

    def test_course_alias(self):
        comment = normalize_comment({"id": 1, "target_type": "Curso", "target_id": 3})

        assert comment.target_type is TargetType.COURSE
        assert comment.target_id == "3"


class TestAuthorName:
    """Tests for author_name."""

    def test_flat_keys_take_precedence(self):
        raw = {"user_name": "Flat Name", "user": {"name": "Nested Name"}}

        assert author_name(raw) == "Flat Name"

    def test_nested_user_fallbacks(self):
        assert author_name({"user": {"nome": "Carla"}}) == "Carla"
        assert author_name({"user": {"full_name": "Dora Reis"}}) == "Dora Reis"

    def test_missing(self):
        assert author_name({"user": None}) is None


class TestNormalizePage:
    """Tests for normalize_page."""

    def test_paginated_payload(self):
        raw = {
            "data": [{"id": 1}, {"id": 2}, {"body": "no id"}],
            "current_page": 2,
            "last_page": 5,
            "total": 42,
        }

        page = normalize_page(raw)

        assert [c.id for c in page.items] == ["1", "2"]
        assert (page.current_page, page.last_page, page.total) == (2, 5, 42)
        assert page.has_more

    def test_bare_list_is_one_page(self):
        page = normalize_page([{"id": 1}, {"id": 2}])

        assert page.last_page == 1
        assert page.total == 2
        assert not page.has_more

    def test_parent_fallback_for_replies_endpoint(self):
        page = normalize_page({"data": [{"id": 5}]}, parent_id="1")

        assert page.items[0].parent_id == "1"

    def test_missing_pagination_defaults(self):
        page = normalize_page({"items": [{"id": 1}], "page": 0})

        assert (page.current_page, page.last_page, page.total) == (1, 1, None)


class TestNormalizeList:
    """Tests for normalize_list."""

    def test_data_wrapper(self):
        comments = normalize_list(
            {"data": [{"id": 1}]}, default_status=CommentStatus.APPROVED
        )

        assert comments[0].status is CommentStatus.APPROVED

    def test_unexpected_payload(self):
        assert normalize_list("oops") == []
