"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .get_target_thread import (
    GetTargetThreadRequest,
    GetTargetThreadResponse,
    GetTargetThreadUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "GetTargetThreadRequest",
    "GetTargetThreadResponse",
    "GetTargetThreadUseCase",
]
