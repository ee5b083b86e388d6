"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.bookmark import BookmarkRepository
from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.like import LikeRepository
from forum.domain.repository.notification import NotificationRepository
from forum.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
    "NotificationRepository",
    "BookmarkRepository",
]
