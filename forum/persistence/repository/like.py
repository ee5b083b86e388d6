"""PostgreSQL implementation of Like repository."""

from sqlalchemy import Column, Table, and_, delete
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import LikeRepository
from forum.domain.value import LikeableType, UserId
from forum.persistence.tables import comment_likes_table, post_likes_table


def _like_table(likeable_type: LikeableType) -> tuple[Table, Column]:
    """Pick the like relation and its entity column for a likeable type."""
    if likeable_type == LikeableType.POST:
        return post_likes_table, post_likes_table.c.post_id
    return comment_likes_table, comment_likes_table.c.comment_id


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(
        self, likeable_type: LikeableType, likeable_id: int, user_id: UserId
    ) -> bool:
        """Record a like; the unique constraint makes repeats a no-op."""
        table, entity_column = _like_table(likeable_type)
        stmt = (
            insert(table)
            .values({entity_column.name: likeable_id, "user_id": user_id})
            .on_conflict_do_nothing(index_elements=[entity_column, table.c.user_id])
            .returning(table.c.id)
        )
        result = await self.session.execute(stmt)
        added = result.first() is not None
        await self.session.flush()
        return added

    async def remove(
        self, likeable_type: LikeableType, likeable_id: int, user_id: UserId
    ) -> bool:
        """Remove a like."""
        table, entity_column = _like_table(likeable_type)
        stmt = (
            delete(table)
            .where(and_(entity_column == likeable_id, table.c.user_id == user_id))
            .returning(table.c.id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed
