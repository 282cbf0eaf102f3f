"""Application layer DI providers."""

from dishka import Scope, provide

from ead.application.usecase.comment import (
    CreateCommentUseCase,
    GetTargetThreadUseCase,
)
from ead.application.usecase.moderation import (
    ListModerationQueueUseCase,
    LoadFullThreadUseCase,
    LoadTargetCommentsUseCase,
    ModerateCommentUseCase,
    ReplyAsModeratorUseCase,
)
from ead.application.usecase.note import GetNoteUseCase, SaveNoteUseCase
from ead.domain.service import (
    CommentService,
    ModerationService,
    NoteService,
    StatusTranslator,
)
from ead.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_target_thread_use_case(
        self, comment_service: CommentService, translator: StatusTranslator
    ) -> GetTargetThreadUseCase:
        """Provide get target thread use case."""
        return GetTargetThreadUseCase(
            comment_service=comment_service, translator=translator
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, translator: StatusTranslator
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, translator=translator
        )

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_list_moderation_queue_use_case(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> ListModerationQueueUseCase:
        """Provide list moderation queue use case."""
        return ListModerationQueueUseCase(
            moderation_service=moderation_service, translator=translator
        )

    @provide(scope=Scope.REQUEST)
    def get_load_target_comments_use_case(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> LoadTargetCommentsUseCase:
        """Provide load target comments use case."""
        return LoadTargetCommentsUseCase(
            moderation_service=moderation_service, translator=translator
        )

    @provide(scope=Scope.REQUEST)
    def get_load_full_thread_use_case(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> LoadFullThreadUseCase:
        """Provide load full thread use case."""
        return LoadFullThreadUseCase(
            moderation_service=moderation_service, translator=translator
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, moderation_service: ModerationService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_reply_as_moderator_use_case(
        self, moderation_service: ModerationService, translator: StatusTranslator
    ) -> ReplyAsModeratorUseCase:
        """Provide reply as moderator use case."""
        return ReplyAsModeratorUseCase(
            moderation_service=moderation_service, translator=translator
        )

    # Note use cases
    @provide(scope=Scope.REQUEST)
    def get_get_note_use_case(self, note_service: NoteService) -> GetNoteUseCase:
        """Provide get note use case."""
        return GetNoteUseCase(note_service=note_service)

    @provide(scope=Scope.REQUEST)
    def get_save_note_use_case(self, note_service: NoteService) -> SaveNoteUseCase:
        """Provide save note use case."""
        return SaveNoteUseCase(note_service=note_service)
