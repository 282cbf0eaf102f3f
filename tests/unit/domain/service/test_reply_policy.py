"""Unit tests for ReplyPolicy."""

from ead.config import ReplyPolicySettings
from ead.domain.service import Ok, Rejected, RejectionReason, ReplyPolicy


class TestValidate:
    """Tests for validate method."""

    def test_accepts_and_trims(self):
        """Valid text is returned trimmed."""
        result = ReplyPolicy().validate("  Great explanation!  ", depth=0)

        assert result == Ok("Great explanation!")
        assert result.accepted

    def test_too_short(self):
        """Text under the minimum length is refused."""
        result = ReplyPolicy(min_length=3).validate("hi")

        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.TOO_SHORT

    def test_whitespace_only_is_too_short(self):
        """Padding does not count towards the length."""
        result = ReplyPolicy(min_length=3).validate("   a   ")

        assert result.reason is RejectionReason.TOO_SHORT

    def test_too_long(self):
        """Text over the maximum length is refused."""
        result = ReplyPolicy(max_length=500).validate("a" * 501)

        assert result.reason is RejectionReason.TOO_LONG

    def test_length_bounds_are_inclusive(self):
        """Exactly min and max lengths are accepted."""
        policy = ReplyPolicy(min_length=3, max_length=500)

        assert policy.validate("abc").accepted
        assert policy.validate("a" * 500).accepted

    def test_depth_exceeded(self):
        """Replying to a comment at the max depth is refused."""
        result = ReplyPolicy(max_depth=3).validate("Nice point", depth=3)

        assert result.reason is RejectionReason.DEPTH_EXCEEDED

    def test_depth_below_limit(self):
        """Replying one level above the limit is allowed."""
        assert ReplyPolicy(max_depth=3).validate("Nice point", depth=2).accepted

    def test_unbounded_depth(self):
        """A policy without max depth accepts any nesting."""
        assert ReplyPolicy(max_depth=None).validate("Nice point", depth=40).accepted

    def test_max_depth_override(self):
        """An explicit max depth replaces the configured one."""
        policy = ReplyPolicy(max_depth=3)

        assert policy.validate("Nice point", depth=5, max_depth=None).accepted
        assert not policy.validate("Nice point", depth=1, max_depth=1).accepted

    def test_profanity(self):
        """Denylisted words are refused regardless of case."""
        result = ReplyPolicy().validate("you are an IDIOT")

        assert result.reason is RejectionReason.PROFANITY
        assert "offensive" in result.message

    def test_profanity_matches_whole_words_only(self):
        """Words merely containing a denylisted word pass."""
        policy = ReplyPolicy(denylist=["ass"])

        assert policy.validate("a classic assessment").accepted
        assert not policy.validate("what an ass!").accepted

    def test_portuguese_denylist(self):
        """The built-in list covers Portuguese words."""
        assert ReplyPolicy().validate("que merda de aula").reason is (
            RejectionReason.PROFANITY
        )

    def test_from_settings_extends_denylist(self):
        """Extra denylist words are appended to the built-in ones."""
        policy = ReplyPolicy.from_settings(
            ReplyPolicySettings(min_length=2, max_length=10, max_depth=None),
            extra_denylist=["spam"],
        )

        assert policy.min_length == 2
        assert policy.max_depth is None
        assert policy.validate("spam").reason is RejectionReason.PROFANITY
        assert policy.validate("idiot").reason is RejectionReason.PROFANITY


class TestValidateRating:
    """Tests for validate_rating method."""

    def test_root_requires_rating(self):
        """Roots without a rating are refused."""
        policy = ReplyPolicy()

        assert policy.validate_rating(None, is_root=True).reason is (
            RejectionReason.RATING_REQUIRED
        )
        assert policy.validate_rating(0, is_root=True).reason is (
            RejectionReason.RATING_REQUIRED
        )

    def test_root_rating_range(self):
        """Ratings must be between 1 and 5."""
        policy = ReplyPolicy()

        assert policy.validate_rating(1, is_root=True) is None
        assert policy.validate_rating(5, is_root=True) is None
        assert policy.validate_rating(6, is_root=True).reason is (
            RejectionReason.RATING_OUT_OF_RANGE
        )

    def test_replies_carry_no_rating(self):
        """Replies are refused when rated."""
        policy = ReplyPolicy()

        assert policy.validate_rating(None, is_root=False) is None
        assert policy.validate_rating(4, is_root=False).reason is (
            RejectionReason.RATING_NOT_ALLOWED
        )
