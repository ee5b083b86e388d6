"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.service import NotificationService
from forum.domain.value import NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification item in response."""

    notification_id: int
    type: NotificationType
    post_id: int
    comment_id: int
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    total: int


class ListNotificationsUseCase:
    """Use case for pulling a user's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications = await self.notification_service.list_for_user(
            UserId(request.user_id)
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationItem(
                    notification_id=n.id,
                    type=n.type,
                    post_id=n.post_id,
                    comment_id=n.comment_id,
                    created_at=n.created_at,
                )
                for n in notifications
            ],
            total=len(notifications),
        )
