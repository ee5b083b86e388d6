"""PostgreSQL repository implementations."""

from forum.persistence.repository.bookmark import PostgresBookmarkRepository
from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.like import PostgresLikeRepository
from forum.persistence.repository.notification import PostgresNotificationRepository
from forum.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresNotificationRepository",
    "PostgresBookmarkRepository",
]
