"""Display labels for moderation statuses."""

from ead.domain.value import CommentStatus, ModerationAction

LABELS: dict[str, dict[CommentStatus, str]] = {
    "en": {
        CommentStatus.PENDING: "Pending",
        CommentStatus.APPROVED: "Approved",
        CommentStatus.REJECTED: "Rejected",
    },
    "pt-BR": {
        CommentStatus.PENDING: "Pendente",
        CommentStatus.APPROVED: "Aprovado",
        CommentStatus.REJECTED: "Rejeitado",
    },
}


class StatusTranslator:
    """Maps backend status codes to display labels.

    Total: unknown, empty or missing statuses get the pending label.
    """

    def __init__(self, locale: str = "en") -> None:
        self.locale = locale if locale in LABELS else "en"
        self.labels = LABELS[self.locale]

    def translate(self, status: str | CommentStatus | None) -> str:
        """Return the display label for a status value."""
        return self.labels[CommentStatus.parse(status)]

    def can_transition(
        self, status: str | CommentStatus | None, action: ModerationAction
    ) -> bool:
        """Whether a moderation action is allowed from a status.

        Approve and reject only apply to pending comments; approved and
        rejected are terminal from the client's perspective. Delete is a
        removal event and is always allowed.
        """
        if action is ModerationAction.DELETE:
            return True
        return CommentStatus.parse(status) is CommentStatus.PENDING
