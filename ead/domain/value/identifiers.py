"""Strongly typed identifiers for EAD domain entities.

The backend uses integer keys for comments and targets, but the client
treats every identifier as an opaque string so that ids coming from
different endpoints compare equal regardless of their JSON type.
"""

from typing import NewType

CommentId = NewType("CommentId", str)
TargetId = NewType("TargetId", str)
