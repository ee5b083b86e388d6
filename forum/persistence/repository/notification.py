"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Notification
from forum.domain.repository import NotificationRepository
from forum.domain.value import CommentId, NotificationType, PostId, UserId
from forum.persistence.mappers import row_to_notification
from forum.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        user_id: UserId,
        type: NotificationType,
        post_id: PostId,
        comment_id: CommentId,
    ) -> Notification:
        """Insert a notification inside a SAVEPOINT.

        If the insert fails only the savepoint is rolled back, leaving the
        surrounding request transaction (and the comment in it) intact.
        """
        stmt = (
            insert(notifications_table)
            .values(
                user_id=user_id,
                type=type.value,
                post_id=post_id,
                comment_id=comment_id,
            )
            .returning(notifications_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.one()
        return row_to_notification(row._asdict())

    async def find_by_user(self, user_id: UserId) -> List[Notification]:
        """List a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at), desc(notifications_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]
