"""EAD backend comment API adapter."""

from .client import HttpCommentGateway
from .normalize import author_name, normalize_comment, normalize_list, normalize_page

__all__ = [
    "HttpCommentGateway",
    "author_name",
    "normalize_comment",
    "normalize_list",
    "normalize_page",
]
