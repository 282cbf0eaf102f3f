"""Constraints a new comment or reply must satisfy before submission."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ead.config import ReplyPolicySettings

# Bilingual list used by the student-facing pages; extendable via settings
DEFAULT_DENYLIST: tuple[str, ...] = (
    "porra",
    "merda",
    "caralho",
    "fdp",
    "desgraçado",
    "bosta",
    "idiota",
    "burro",
    "idiot",
    "shit",
    "fuck",
    "fucking",
    "bitch",
    "bastard",
    "asshole",
    "dumb",
    "stupid",
)

# Sentinel for "use the policy's configured max depth"
_POLICY_DEFAULT = object()


class RejectionReason(str, Enum):
    """Why a comment was refused."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    DEPTH_EXCEEDED = "depth_exceeded"
    PROFANITY = "profanity"
    RATING_REQUIRED = "rating_required"
    RATING_OUT_OF_RANGE = "rating_out_of_range"
    RATING_NOT_ALLOWED = "rating_not_allowed"


@dataclass(frozen=True)
class Ok:
    """The text may be submitted."""

    text: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The text must not be submitted."""

    reason: RejectionReason
    message: str

    @property
    def accepted(self) -> bool:
        return False


ValidationResult = Union[Ok, Rejected]


class ReplyPolicy:
    """Pure validation of comment text, nesting depth and rating.

    No I/O: the result is a value, and the caller decides how to report it.

    ``depth`` is the depth of the comment being replied to (0 for a root,
    and 0 for a brand new top-level comment). A reply lands one level
    deeper, so ``depth >= max_depth`` is refused.
    """

    def __init__(
        self,
        min_length: int = 3,
        max_length: int = 500,
        max_depth: int | None = 3,
        denylist: Iterable[str] = DEFAULT_DENYLIST,
    ) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self.max_depth = max_depth
        self.denylist = tuple(dict.fromkeys(w.lower() for w in denylist if w))
        self._denylist_pattern = _compile_denylist(self.denylist)

    @classmethod
    def from_settings(
        cls, settings: ReplyPolicySettings, extra_denylist: Iterable[str] = ()
    ) -> "ReplyPolicy":
        """Build a policy from one flow's settings."""
        return cls(
            min_length=settings.min_length,
            max_length=settings.max_length,
            max_depth=settings.max_depth,
            denylist=(*DEFAULT_DENYLIST, *extra_denylist),
        )

    def validate(
        self, text: str, depth: int = 0, max_depth=_POLICY_DEFAULT
    ) -> ValidationResult:
        """Validate comment text at a given reply depth.

        Args:
            text: Raw text as typed by the user
            depth: Depth of the comment being replied to
            max_depth: Override of the policy's max depth (None = unbounded)

        Returns:
            Ok with the trimmed text, or Rejected with a reason
        """
        limit = self.max_depth if max_depth is _POLICY_DEFAULT else max_depth
        trimmed = (text or "").strip()

        if self.contains_profanity(trimmed):
            return Rejected(
                RejectionReason.PROFANITY,
                "Please remove offensive language before publishing",
            )
        if len(trimmed) < self.min_length:
            return Rejected(
                RejectionReason.TOO_SHORT,
                f"Comment must have at least {self.min_length} characters",
            )
        if len(trimmed) > self.max_length:
            return Rejected(
                RejectionReason.TOO_LONG,
                f"Comment must have at most {self.max_length} characters",
            )
        if limit is not None and depth >= limit:
            return Rejected(
                RejectionReason.DEPTH_EXCEEDED,
                f"Reply depth limit reached (max: {limit})",
            )
        return Ok(trimmed)

    def validate_rating(self, rating: int | None, is_root: bool) -> Rejected | None:
        """Validate the star rating of a comment.

        Root comments require a rating between 1 and 5; replies carry none.

        Returns:
            None when the rating is acceptable, otherwise Rejected
        """
        if not is_root:
            if rating is not None:
                return Rejected(
                    RejectionReason.RATING_NOT_ALLOWED, "Replies cannot be rated"
                )
            return None
        if rating is None or rating == 0:
            return Rejected(
                RejectionReason.RATING_REQUIRED, "Choose a rating from 1 to 5 stars"
            )
        if not 1 <= rating <= 5:
            return Rejected(
                RejectionReason.RATING_OUT_OF_RANGE, "Rating must be between 1 and 5"
            )
        return None

    def contains_profanity(self, text: str) -> bool:
        """Whole-word, case-insensitive denylist match."""
        if self._denylist_pattern is None:
            return False
        return self._denylist_pattern.search(text) is not None


def _compile_denylist(words: tuple[str, ...]) -> re.Pattern[str] | None:
    if not words:
        return None
    # Longest first so "fucking" is tried before "fuck"
    alternatives = "|".join(
        re.escape(word) for word in sorted(words, key=len, reverse=True)
    )
    return re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE)
