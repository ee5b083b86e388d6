"""Notification domain service.

Notifications fan out from comment creation. At most one is produced per
new comment:

- a reply notifies the author of the parent comment ("reply")
- a top-level comment notifies the author of the post ("comment")
- nobody is notified about their own activity, and nothing is produced when
  the parent comment or post can't be found
"""

from dataclasses import dataclass
from typing import Optional

import logfire
from sqlalchemy.exc import SQLAlchemyError

from forum.domain.model import Comment, Notification, Post
from forum.domain.repository import NotificationRepository
from forum.domain.value import NotificationType, UserId

from .base import Service


@dataclass(frozen=True)
class NotificationTarget:
    """Who gets notified about a new comment, and why."""

    recipient_user_id: UserId
    type: NotificationType


def derive_recipient(
    comment: Comment, parent: Optional[Comment], post: Optional[Post]
) -> Optional[NotificationTarget]:
    """Work out who, if anyone, should hear about a new comment.

    Args:
        comment: The newly created comment
        parent: The comment it replies to, if it is a reply and was found
        post: The post it was made on, if found

    Returns:
        The recipient and notification type, or None
    """
    if comment.parent_id is not None:
        if parent is None or parent.id != comment.parent_id:
            return None
        if parent.user_id == comment.user_id:
            return None
        return NotificationTarget(
            recipient_user_id=parent.user_id, type=NotificationType.REPLY
        )

    if post is None or post.user_id == comment.user_id:
        return None
    return NotificationTarget(
        recipient_user_id=post.user_id, type=NotificationType.COMMENT
    )


class NotificationService(Service):
    """Domain service for notification fanout and retrieval."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_for_comment(
        self,
        comment: Comment,
        parent: Optional[Comment],
        post: Optional[Post],
    ) -> Notification | None:
        """Persist the notification for a new comment, if one is due.

        Storing the notification is best-effort: a store failure is logged
        and swallowed so the comment itself still goes through.

        Args:
            comment: The newly created comment
            parent: Parent comment for replies
            post: Post the comment was made on

        Returns:
            The stored notification, or None if none was due or storing failed
        """
        with logfire.span(
            "notification_service.notify_for_comment",
            comment_id=comment.id,
            post_id=comment.post_id,
        ):
            target = derive_recipient(comment, parent, post)
            if target is None:
                logfire.info("No notification due", comment_id=comment.id)
                return None

            try:
                notification = await self.notification_repository.create(
                    user_id=target.recipient_user_id,
                    type=target.type,
                    post_id=comment.post_id,
                    comment_id=comment.id,
                )
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to store notification",
                    comment_id=comment.id,
                    recipient=target.recipient_user_id,
                    error=str(e),
                )
                return None

            logfire.info(
                "Notification created",
                notification_id=notification.id,
                recipient=notification.user_id,
                type=notification.type.value,
            )
            return notification

    async def list_for_user(self, user_id: UserId) -> list[Notification]:
        """Get a user's notifications, newest first.

        Args:
            user_id: Recipient

        Returns:
            Notifications
        """
        with logfire.span("notification_service.list_for_user", user_id=user_id):
            notifications = await self.notification_repository.find_by_user(user_id)
            logfire.info(
                "Notifications retrieved", user_id=user_id, count=len(notifications)
            )
            return notifications
