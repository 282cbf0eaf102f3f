"""Per-view thread state: partial and full reply views plus row UI state."""

from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass

import logfire

from ead.domain.model import DEFAULT_MAX_DEPTH, Comment, ReplyMap, ThreadNode
from ead.domain.service.abort import AbortSignal
from ead.domain.service.thread_merger import ThreadMerger
from ead.domain.value import CommentId

DEFAULT_SESSION = "default"


@dataclass
class UiState:
    """Row state of one comment in a moderation or thread view."""

    expanded: bool = False
    reply_visible: bool = False
    reply_draft: str = ""


class ThreadCache:
    """Thread cache owned by exactly one view.

    Holds the replies visible on the current results page (partial), the
    complete threads loaded on demand (full), and row UI state keyed by
    comment id. At most one full-thread load is current at a time; starting
    another supersedes it, and a superseded load can no longer write.
    """

    def __init__(
        self,
        merger: ThreadMerger | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.merger = merger or ThreadMerger()
        self.max_depth = max_depth
        self.page_comments: list[Comment] = []
        self.partial: ReplyMap = {}
        self.full: ReplyMap = {}
        self.ui: dict[CommentId, UiState] = {}
        self._loads: dict[CommentId, AbortSignal] = {}

    def set_page(self, comments: Iterable[Comment]) -> None:
        """Replace the partial view with the comments of a results page.

        Root rows are expanded by default.
        """
        self.page_comments = list(comments)
        self.partial = self.merger.group_by_parent(self.page_comments)
        for comment in self.page_comments:
            if comment.is_root:
                self.ui_state(comment.id).expanded = True

    def ui_state(self, comment_id: CommentId) -> UiState:
        """Row state for a comment, created on first access."""
        return self.ui.setdefault(comment_id, UiState())

    def toggle_reply(self, comment_id: CommentId) -> UiState:
        """Show or hide the inline reply form; opening it expands the row."""
        state = self.ui_state(comment_id)
        state.expanded = True
        state.reply_visible = not state.reply_visible
        return state

    def begin_load(self, parent_id: CommentId) -> AbortSignal:
        """Register a full-thread load, superseding any load in flight."""
        for pending_id, signal in self._loads.items():
            signal.abort(f"superseded by load of {parent_id}")
            logfire.info(
                "Full thread load superseded",
                parent_id=str(pending_id),
                by_parent_id=str(parent_id),
            )
        self._loads.clear()
        signal = AbortSignal()
        self._loads[parent_id] = signal
        return signal

    def complete_load(
        self, parent_id: CommentId, signal: AbortSignal, replies: Iterable[Comment]
    ) -> bool:
        """Store a loaded thread if its load is still the current one.

        Args:
            parent_id: Comment whose thread was loaded
            signal: Signal returned by ``begin_load``
            replies: Every reply loaded for the comment

        Returns:
            True if stored, False if the load was superseded
        """
        if signal.aborted or self._loads.get(parent_id) is not signal:
            logfire.warn(
                "Dropped stale full thread",
                parent_id=str(parent_id),
                reason=signal.reason,
            )
            return False
        del self._loads[parent_id]

        loaded = self.merger.group_by_parent(replies)
        loaded.setdefault(parent_id, [])
        self.full.update(loaded)
        logfire.info(
            "Full thread stored",
            parent_id=str(parent_id),
            count=sum(len(items) for items in loaded.values()),
        )
        return True

    def fail_load(self, parent_id: CommentId, signal: AbortSignal) -> None:
        """Forget a load that failed, if it is still the current one."""
        if self._loads.get(parent_id) is signal:
            del self._loads[parent_id]

    def is_loading(self, parent_id: CommentId) -> bool:
        return parent_id in self._loads

    def merged(self) -> ReplyMap:
        """Partial and full views merged, full view first."""
        return self.merger.merge(self.partial, self.full)

    def thread_for(self, root_id: CommentId) -> list[ThreadNode]:
        """Depth-annotated merged thread under a root."""
        return self.merger.annotate_depths(self.merged(), root_id, self.max_depth)

    def find(self, comment_id: CommentId) -> Comment | None:
        """Look up a cached comment in the page or any loaded thread."""
        for comment in self.page_comments:
            if comment.id == comment_id:
                return comment
        for view in (self.full, self.partial):
            for replies in view.values():
                for comment in replies:
                    if comment.id == comment_id:
                        return comment
        return None

    def forget_thread(self, parent_id: CommentId) -> None:
        """Drop the loaded thread of a comment so the next load refetches it."""
        self.full.pop(parent_id, None)

    def invalidate(self, comment_id: CommentId) -> None:
        """Remove a deleted comment from every cached view."""
        self.page_comments = [c for c in self.page_comments if c.id != comment_id]
        for view in (self.partial, self.full):
            view.pop(comment_id, None)
            for parent_id in list(view):
                view[parent_id] = [c for c in view[parent_id] if c.id != comment_id]
        self.ui.pop(comment_id, None)
        signal = self._loads.pop(comment_id, None)
        if signal:
            signal.abort("comment deleted")
        logfire.info("Comment invalidated", comment_id=str(comment_id))

    def invalidate_all(self) -> None:
        """Drop every cached thread; the next fetch rebuilds the view."""
        for signal in self._loads.values():
            signal.abort("view invalidated")
        self._loads.clear()
        self.page_comments = []
        self.partial = {}
        self.full = {}


class ThreadCacheRegistry:
    """Thread caches keyed by client session and view name.

    Each client session owns its caches, and within a session each view (the
    moderation queue, a target's moderation page) owns its own cache. Loads,
    page replacements and invalidations never reach another session. The
    least recently used session is evicted once ``max_sessions`` is reached.
    """

    def __init__(
        self,
        merger: ThreadMerger | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_sessions: int = 256,
    ) -> None:
        self.merger = merger or ThreadMerger()
        self.max_depth = max_depth
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, dict[str, ThreadCache]] = OrderedDict()

    def _views(self, session: str) -> dict[str, ThreadCache]:
        if session in self._sessions:
            self._sessions.move_to_end(session)
            return self._sessions[session]
        if len(self._sessions) >= self.max_sessions:
            evicted, stale = self._sessions.popitem(last=False)
            for cache in stale.values():
                cache.invalidate_all()
            logfire.info("Thread cache session evicted", session=evicted)
        views: dict[str, ThreadCache] = {}
        self._sessions[session] = views
        return views

    def get(self, view: str, session: str = DEFAULT_SESSION) -> ThreadCache:
        """Cache for a view of one session, created on first access."""
        views = self._views(session)
        if view not in views:
            views[view] = ThreadCache(self.merger, self.max_depth)
        return views[view]

    def all(self, session: str = DEFAULT_SESSION) -> list[ThreadCache]:
        """Every cache owned by one session."""
        return list(self._sessions.get(session, {}).values())

    def sessions(self) -> list[str]:
        return list(self._sessions)
