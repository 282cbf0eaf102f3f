"""Domain layer DI providers."""

from dishka import Scope, provide

from ead.config import Settings
from ead.domain.repository import CommentGateway, NoteRepository
from ead.domain.service import (
    CommentService,
    ModerationService,
    NoteService,
    PagedFetcher,
    ReplyPolicy,
    StatusTranslator,
    ThreadBuilder,
    ThreadCacheRegistry,
    ThreadMerger,
)
from ead.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Stateless helpers and the session-keyed thread caches live for the whole
    app. Services are REQUEST-scoped to align with the notes session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_paged_fetcher(self, settings: Settings) -> PagedFetcher:
        """Provide paged fetcher."""
        return PagedFetcher(max_pages=settings.paging.max_pages)

    @provide(scope=Scope.APP)
    def get_thread_builder(self, settings: Settings) -> ThreadBuilder:
        """Provide thread builder."""
        return ThreadBuilder(max_depth=settings.thread.max_traversal_depth)

    @provide(scope=Scope.APP)
    def get_thread_merger(self) -> ThreadMerger:
        """Provide thread merger."""
        return ThreadMerger()

    @provide(scope=Scope.APP)
    def get_status_translator(self, settings: Settings) -> StatusTranslator:
        """Provide status translator for the configured locale."""
        return StatusTranslator(locale=settings.labels.locale)

    @provide(scope=Scope.APP)
    def get_thread_caches(
        self, merger: ThreadMerger, settings: Settings
    ) -> ThreadCacheRegistry:
        """Provide the thread caches of every moderation session."""
        return ThreadCacheRegistry(
            merger=merger,
            max_depth=settings.thread.max_traversal_depth,
            max_sessions=settings.thread.max_sessions,
        )

    @provide
    def get_comment_service(
        self,
        gateway: CommentGateway,
        builder: ThreadBuilder,
        settings: Settings,
    ) -> CommentService:
        """Provide comment domain service with the student policy."""
        return CommentService(
            gateway=gateway,
            builder=builder,
            policy=ReplyPolicy.from_settings(
                settings.policies.student,
                extra_denylist=settings.policies.extra_denylist,
            ),
        )

    @provide
    def get_moderation_service(
        self,
        gateway: CommentGateway,
        fetcher: PagedFetcher,
        builder: ThreadBuilder,
        translator: StatusTranslator,
        caches: ThreadCacheRegistry,
        settings: Settings,
    ) -> ModerationService:
        """Provide moderation domain service with the moderator policy."""
        return ModerationService(
            gateway=gateway,
            fetcher=fetcher,
            builder=builder,
            translator=translator,
            policy=ReplyPolicy.from_settings(
                settings.policies.moderator,
                extra_denylist=settings.policies.extra_denylist,
            ),
            caches=caches,
            per_page=settings.paging.per_page,
        )

    @provide
    def get_note_service(self, note_repository: NoteRepository) -> NoteService:
        """Provide note domain service."""
        return NoteService(note_repository=note_repository)
