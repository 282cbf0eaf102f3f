"""Unit tests for ThreadBuilder."""

from ead.domain.service import ThreadBuilder
from ead.domain.value import CommentId
from tests.conftest import make_comment


class TestBuild:
    """Tests for build method."""

    def test_flat_records_with_parent_ids(self):
        """Roots and replies are classified by parent_id."""
        # Arrange
        records = [
            make_comment(1),
            make_comment(2),
            make_comment(3, parent_id=1),
            make_comment(4, parent_id=3),
        ]

        # Act
        forest = ThreadBuilder().build(records)

        # Assert
        assert [c.id for c in forest.roots] == ["1", "2"]
        assert [c.id for c in forest.children_of(CommentId("1"))] == ["3"]
        assert [c.id for c in forest.children_of(CommentId("3"))] == ["4"]
        assert forest.children_of(CommentId("2")) == []
        assert forest.orphans == []

    def test_nested_replies_get_owner_as_parent(self):
        """Nested replies without parent_id are attached to their owner."""
        # Arrange
        grandchild = make_comment(4).model_copy(update={"rating": None})
        child = make_comment(3, replies=(grandchild,)).model_copy(
            update={"rating": None}
        )
        root = make_comment(1, replies=(child,))

        # Act
        forest = ThreadBuilder().build([root])

        # Assert
        assert [c.id for c in forest.roots] == ["1"]
        assert forest.by_id[CommentId("3")].parent_id == "1"
        assert forest.by_id[CommentId("4")].parent_id == "3"
        assert forest.by_id[CommentId("1")].replies == ()

    def test_duplicates_keep_first_occurrence(self):
        """A comment seen twice appears once, as first encountered."""
        records = [
            make_comment(1),
            make_comment(2, parent_id=1, body="first copy"),
            make_comment(2, parent_id=1, body="second copy"),
        ]

        forest = ThreadBuilder().build(records)

        assert len(forest) == 2
        replies = forest.children_of(CommentId("1"))
        assert [c.body for c in replies] == ["first copy"]

    def test_orphans_are_excluded(self):
        """Replies to unknown parents and self-parented comments are orphans."""
        # Arrange
        records = [
            make_comment(1),
            make_comment(5, parent_id=99),
            make_comment(6, parent_id=6),
        ]

        # Act
        forest = ThreadBuilder().build(records)

        # Assert
        assert [c.id for c in forest.roots] == ["1"]
        assert sorted(c.id for c in forest.orphans) == ["5", "6"]
        assert forest.children_of(CommentId("99")) == []

    def test_children_keep_encounter_order(self):
        """Siblings are listed in the order the backend returned them."""
        records = [
            make_comment(1),
            make_comment(9, parent_id=1),
            make_comment(3, parent_id=1),
            make_comment(5, parent_id=1),
        ]

        forest = ThreadBuilder().build(records)

        assert [c.id for c in forest.children_of(CommentId("1"))] == ["9", "3", "5"]


class TestThreadUnder:
    """Tests for thread_under method."""

    def test_depths_are_relative_to_root(self):
        """Direct replies are depth 1, their replies depth 2."""
        # Arrange
        builder = ThreadBuilder()
        forest = builder.build(
            [
                make_comment(1),
                make_comment(2),
                make_comment(3, parent_id=1),
                make_comment(4, parent_id=3),
                make_comment(5, parent_id=1),
            ]
        )

        # Act
        nodes = builder.thread_under(forest, CommentId("1"))

        # Assert
        assert [(n.comment.id, n.depth) for n in nodes] == [
            ("3", 1),
            ("4", 2),
            ("5", 1),
        ]
        assert builder.thread_under(forest, CommentId("2")) == []

    def test_cycle_terminates(self):
        """A parent cycle below a root is traversed once and stops."""
        # Arrange
        builder = ThreadBuilder(max_depth=10)
        a = make_comment(2, parent_id=3)
        b = make_comment(3, parent_id=2)
        forest = builder.build([make_comment(1), a, b])
        # Splice the cycle under the root
        forest.children_by_parent.setdefault(CommentId("1"), []).append(a)

        # Act
        nodes = builder.thread_under(forest, CommentId("1"))

        # Assert
        assert [n.comment.id for n in nodes] == ["2", "3"]

    def test_depth_guard(self):
        """Nodes past max_depth are not visited."""
        builder = ThreadBuilder(max_depth=2)
        forest = builder.build(
            [
                make_comment(1),
                make_comment(2, parent_id=1),
                make_comment(3, parent_id=2),
                make_comment(4, parent_id=3),
            ]
        )

        nodes = builder.thread_under(forest, CommentId("1"))

        assert [n.comment.id for n in nodes] == ["2", "3"]
