"""PostgreSQL implementation of Bookmark repository."""

from typing import List

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import BookmarkRepository
from forum.domain.value import PostId, UserId
from forum.persistence.tables import bookmarks_table


class PostgresBookmarkRepository(BookmarkRepository):
    """PostgreSQL implementation of BookmarkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_user_ids(self, post_id: PostId) -> List[UserId]:
        """List users who bookmarked a post."""
        stmt = (
            select(bookmarks_table.c.user_id)
            .where(bookmarks_table.c.post_id == post_id)
            .order_by(bookmarks_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [UserId(row.user_id) for row in result.fetchall()]

    async def add(self, user_id: UserId, post_id: PostId) -> bool:
        """Bookmark a post; repeats are a no-op."""
        stmt = (
            insert(bookmarks_table)
            .values(user_id=user_id, post_id=post_id)
            .on_conflict_do_nothing(
                index_elements=[bookmarks_table.c.user_id, bookmarks_table.c.post_id]
            )
            .returning(bookmarks_table.c.id)
        )
        result = await self.session.execute(stmt)
        added = result.first() is not None
        await self.session.flush()
        return added

    async def remove(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a bookmark."""
        stmt = (
            delete(bookmarks_table)
            .where(
                and_(
                    bookmarks_table.c.user_id == user_id,
                    bookmarks_table.c.post_id == post_id,
                )
            )
            .returning(bookmarks_table.c.id)
        )
        result = await self.session.execute(stmt)
        removed = result.first() is not None
        await self.session.flush()
        return removed
