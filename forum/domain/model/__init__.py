"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.notification import Notification
from forum.domain.model.post import Post

__all__ = [
    "Post",
    "Comment",
    "Notification",
]
