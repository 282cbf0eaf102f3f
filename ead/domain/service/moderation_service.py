"""Moderation domain service."""

from dataclasses import dataclass, field

import logfire

from ead.domain.error import (
    FetchAbortedError,
    InvalidTransitionError,
    PolicyViolationError,
)
from ead.domain.model import Comment, CommentForest, Page, ReplyMap, ThreadNode
from ead.domain.repository import CommentGateway
from ead.domain.value import (
    CommentId,
    ModerationAction,
    StatusFilter,
    TargetId,
    TargetType,
)

from .abort import AbortSignal
from .base import Service
from .paged_fetcher import PagedFetcher
from .reply_policy import ReplyPolicy
from .status_translator import StatusTranslator
from .thread_builder import ThreadBuilder
from .thread_cache import DEFAULT_SESSION, ThreadCache, ThreadCacheRegistry

MODERATION_VIEW = "moderation"


def target_view(target_type: TargetType, target_id: TargetId) -> str:
    """Name of the moderation view scoped to one target."""
    return f"target:{target_type.value}:{target_id}"


@dataclass
class ModerationQueue:
    """One page of the moderation queue.

    Rows are the root comments of the page; replies on the page and any
    fully loaded thread are merged into ``reply_map``.
    """

    page: Page[Comment]
    roots: list[Comment]
    reply_map: ReplyMap
    threads: dict[CommentId, list[ThreadNode]] = field(default_factory=dict)


class ModerationService(Service):
    """Domain service for the moderation panel."""

    def __init__(
        self,
        gateway: CommentGateway,
        fetcher: PagedFetcher,
        builder: ThreadBuilder,
        translator: StatusTranslator,
        policy: ReplyPolicy,
        caches: ThreadCacheRegistry,
        per_page: int = 50,
    ) -> None:
        """Initialize moderation service.

        Args:
            gateway: Backend comment gateway
            fetcher: Paged fetcher for load-all flows
            builder: Thread builder
            translator: Status translator, used for transition checks
            policy: Moderator reply policy
            caches: Per-view thread caches
            per_page: Page size for load-all flows
        """
        self.gateway = gateway
        self.fetcher = fetcher
        self.builder = builder
        self.translator = translator
        self.policy = policy
        self.caches = caches
        self.per_page = per_page

    async def queue_page(
        self,
        status: StatusFilter = StatusFilter.PENDING,
        page: int = 1,
        per_page: int | None = None,
        search: str | None = None,
        view: str = MODERATION_VIEW,
        session: str = DEFAULT_SESSION,
    ) -> ModerationQueue:
        """Load one page of the moderation list into a view.

        Args:
            status: Status filter
            page: 1-based page number
            per_page: Page size (defaults to the configured one)
            search: Case-insensitive filter on body and author name
            view: View whose cache receives the page
            session: Client session owning the view

        Returns:
            Root rows of the page with their merged threads
        """
        with self.span(
            "queue_page",
            status=status.value,
            page=page,
            view=view,
        ):
            result = await self.gateway.admin_list(
                status, page, per_page or self.per_page
            )
            cache = self.caches.get(view, session)
            cache.set_page(result.items)

            roots = [c for c in result.items if c.is_root and _matches(c, search)]
            queue = ModerationQueue(
                page=result,
                roots=roots,
                reply_map=cache.merged(),
                threads={root.id: cache.thread_for(root.id) for root in roots},
            )
            logfire.info(
                "Moderation page loaded",
                page=result.current_page,
                last_page=result.last_page,
                rows=len(roots),
                items=len(result.items),
            )
            return queue

    async def load_target_comments(
        self,
        target_type: TargetType,
        target_id: TargetId,
        status: StatusFilter = StatusFilter.ALL,
        abort: AbortSignal | None = None,
        session: str = DEFAULT_SESSION,
    ) -> CommentForest:
        """Load every moderation page and keep the comments of one target.

        Args:
            target_type: Course or activity
            target_id: Target identifier
            status: Status filter
            abort: Optional signal to stop the accumulation
            session: Client session owning the target view

        Returns:
            Forest of the target's comments

        Raises:
            FetchAbortedError: If ``abort`` fired before completion
        """
        with self.span(
            "load_target_comments",
            target_type=target_type.value,
            target_id=str(target_id),
            status=status.value,
        ):

            async def fetch_page(page: int) -> Page[Comment]:
                return await self.gateway.admin_list(status, page, self.per_page)

            items = await self.fetcher.fetch_all(
                fetch_page, abort=abort, resource="admin_comments"
            )
            matching = [
                c
                for c in items
                if c.target_type is target_type and str(c.target_id) == str(target_id)
            ]
            self.caches.get(target_view(target_type, target_id), session).set_page(
                matching
            )
            logfire.info(
                "Target comments filtered",
                target_id=str(target_id),
                loaded=len(items),
                matching=len(matching),
            )
            return self.builder.build(matching)

    async def load_full_thread(
        self,
        comment_id: CommentId,
        view: str = MODERATION_VIEW,
        status: StatusFilter = StatusFilter.ALL,
        session: str = DEFAULT_SESSION,
    ) -> list[ThreadNode]:
        """Load every reply of a comment into a view's full thread map.

        Starting a load supersedes any load still in flight for the same view
        of the same session. Other sessions are never affected.
        A superseded load never writes into the cache.

        Args:
            comment_id: Parent comment ID
            view: View whose cache receives the thread
            status: Status filter for replies
            session: Client session owning the view

        Returns:
            Depth-annotated merged thread under the comment

        Raises:
            FetchAbortedError: If the load was superseded
        """
        with self.span(
            "load_full_thread",
            comment_id=str(comment_id),
            view=view,
        ):
            cache = self.caches.get(view, session)
            signal = cache.begin_load(comment_id)

            async def fetch_page(page: int) -> Page[Comment]:
                return await self.gateway.replies_of(
                    comment_id, status, page, self.per_page
                )

            try:
                replies = await self.fetcher.fetch_all(
                    fetch_page, abort=signal, resource=f"replies:{comment_id}"
                )
            except FetchAbortedError:
                logfire.info("Full thread load aborted", comment_id=str(comment_id))
                raise
            except Exception:
                cache.fail_load(comment_id, signal)
                raise

            if not cache.complete_load(comment_id, signal, replies):
                raise FetchAbortedError(0)
            return cache.thread_for(comment_id)

    async def moderate(
        self,
        comment_id: CommentId,
        action: ModerationAction,
        session: str = DEFAULT_SESSION,
    ) -> None:
        """Approve, reject or delete a comment.

        Approve and reject are refused for comments known to be approved or
        rejected already. The acting session's caches are only invalidated
        after the backend accepted the action.

        Raises:
            InvalidTransitionError: If the cached status forbids the action
        """
        with self.span(
            "moderate",
            comment_id=str(comment_id),
            action=action.value,
        ):
            known = self._find_cached(comment_id, session)
            if known and not self.translator.can_transition(known.status, action):
                logfire.warn(
                    "Moderation action not allowed",
                    comment_id=str(comment_id),
                    status=known.status.value,
                    action=action.value,
                )
                raise InvalidTransitionError(
                    str(comment_id), known.status.value, action.value
                )

            if action is ModerationAction.APPROVE:
                await self.gateway.approve(comment_id)
            elif action is ModerationAction.REJECT:
                await self.gateway.reject(comment_id)
            else:
                await self.gateway.delete(comment_id)

            for cache in self.caches.all(session):
                if action is ModerationAction.DELETE:
                    cache.invalidate(comment_id)
                else:
                    cache.invalidate_all()
            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                action=action.value,
            )

    async def reply(
        self,
        comment_id: CommentId,
        body: str,
        view: str = MODERATION_VIEW,
        session: str = DEFAULT_SESSION,
    ) -> Comment:
        """Post a moderator reply under a comment.

        Raises:
            PolicyViolationError: If the moderator policy refuses the text
        """
        with self.span(
            "reply", comment_id=str(comment_id), view=view
        ):
            depth = self._cached_depth(comment_id, self.caches.get(view, session))
            result = self.policy.validate(body, depth)
            if not result.accepted:
                logfire.warn(
                    "Moderator reply refused by reply policy",
                    comment_id=str(comment_id),
                    reason=result.reason.value,
                )
                raise PolicyViolationError(result)

            created = await self.gateway.reply_as_moderator(comment_id, result.text)
            for cache in self.caches.all(session):
                cache.forget_thread(comment_id)
            logfire.info(
                "Moderator reply posted",
                comment_id=str(comment_id),
                reply_id=str(created.id),
            )
            return created

    def _find_cached(self, comment_id: CommentId, session: str) -> Comment | None:
        for cache in self.caches.all(session):
            comment = cache.find(comment_id)
            if comment:
                return comment
        return None

    def _cached_depth(self, comment_id: CommentId, cache: ThreadCache) -> int:
        # Unknown comments are validated as roots
        comments = list(cache.page_comments)
        for replies in cache.merged().values():
            comments.extend(replies)
        forest = self.builder.build(comments)
        return forest.depth_of(comment_id, self.builder.max_depth) or 0


def _matches(comment: Comment, search: str | None) -> bool:
    query = (search or "").strip().lower()
    if not query:
        return True
    return query in comment.body.lower() or query in (
        comment.author_name or ""
    ).lower()
