"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_one_level, build_unlimited, walk
from .like_service import LikeService, toggle_membership
from .notification_service import (
    NotificationService,
    NotificationTarget,
    derive_recipient,
)
from .post_service import PostService

__all__ = [
    "CommentNode",
    "CommentService",
    "LikeService",
    "NotificationService",
    "NotificationTarget",
    "PostService",
    "Service",
    "build_one_level",
    "build_unlimited",
    "derive_recipient",
    "toggle_membership",
    "walk",
]
