"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    UserId,
)
from forum.domain.value.pagination import Page
from forum.domain.value.types import LikeableType, NotificationType

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    # Types
    "Page",
    "LikeableType",
    "NotificationType",
]
