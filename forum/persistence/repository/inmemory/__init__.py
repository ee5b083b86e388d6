"""In-memory repository implementations for testing."""

from .bookmark import InMemoryBookmarkRepository
from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .like import InMemoryLikeRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryBookmarkRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
]
