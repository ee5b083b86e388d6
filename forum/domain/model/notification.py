"""Notification entity.

Notifications are a side effect of comment creation and are pulled by the
recipient on demand. They are never mutated after creation.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, NotificationId, NotificationType, PostId, UserId


class Notification(DomainModel):
    """Notification entity.

    Tells ``user_id`` that ``comment_id`` on ``post_id`` was addressed to them.
    """

    id: NotificationId
    user_id: UserId
    type: NotificationType
    post_id: PostId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=datetime.now)
