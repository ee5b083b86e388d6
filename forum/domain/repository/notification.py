"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.model.notification import Notification
from forum.domain.value import CommentId, NotificationType, PostId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Notifications are removed by the store together with the post or
    comment they reference.
    """

    @abstractmethod
    async def create(
        self,
        user_id: UserId,
        type: NotificationType,
        post_id: PostId,
        comment_id: CommentId,
    ) -> Notification:
        """Insert a notification.

        A failure here must not undo work already done in the current
        unit of work.

        Args:
            user_id: Recipient
            type: Notification type
            post_id: Post the triggering comment is on
            comment_id: The triggering comment

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """List a user's notifications, newest first.

        Args:
            user_id: Recipient

        Returns:
            Notifications ordered by creation time descending
        """
        pass
