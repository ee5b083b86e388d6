"""In-memory notification repository for testing."""

from typing import List

from forum.domain.model import Notification
from forum.domain.repository import NotificationRepository
from forum.domain.value import CommentId, NotificationType, PostId, UserId
from forum.persistence.mappers import row_to_notification

from .database import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def create(
        self,
        user_id: UserId,
        type: NotificationType,
        post_id: PostId,
        comment_id: CommentId,
    ) -> Notification:
        """Insert a notification.

        Raises:
            IntegrityError: If the post or comment doesn't exist
        """
        self.db.require("posts", post_id)
        self.db.require("comments", comment_id)

        row = {
            "id": self.db.next_id("notifications"),
            "user_id": user_id,
            "type": type.value,
            "post_id": post_id,
            "comment_id": comment_id,
            "created_at": self.db.now(),
        }
        self.db.notifications[row["id"]] = row
        return row_to_notification(row)

    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """List a user's notifications, newest first."""
        rows = sorted(
            (r for r in self.db.notifications.values() if r["user_id"] == user_id),
            key=lambda r: (r["created_at"], r["id"]),
            reverse=True,
        )
        return [row_to_notification(r) for r in rows]
