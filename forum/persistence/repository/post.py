"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import FromClause, Select, delete, desc, func, insert, null, select
from sqlalchemy.dialects.postgresql import aggregate_order_by
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId
from forum.persistence.mappers import row_to_post
from forum.persistence.tables import bookmarks_table, post_likes_table, posts_table


def _posts_with_likes(source: FromClause = posts_table) -> Select:
    """Select posts with their likers aggregated into a ``likes`` array.

    Args:
        source: FROM clause containing the posts table (joined or bare)
    """
    likes = func.array_remove(
        func.array_agg(
            aggregate_order_by(post_likes_table.c.user_id, post_likes_table.c.id)
        ),
        null(),
    ).label("likes")
    joined = source.outerjoin(
        post_likes_table, post_likes_table.c.post_id == posts_table.c.id
    )
    return select(posts_table, likes).select_from(joined).group_by(posts_table.c.id)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        title: str,
        content: str,
        user_id: UserId,
        tags: List[str],
        category: Optional[str] = None,
    ) -> Post:
        """Insert a new post."""
        stmt = (
            insert(posts_table)
            .values(
                title=title,
                content=content,
                user_id=user_id,
                tags=tags,
                category=category,
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        return row_to_post(row._asdict())

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = _posts_with_likes().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        user_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Post]:
        """Find posts, newest first, optionally filtered."""
        stmt = _posts_with_likes()

        if user_id is not None:
            stmt = stmt.where(posts_table.c.user_id == user_id)
        if tag is not None:
            stmt = stmt.where(posts_table.c.tags.any(tag))
        if category is not None:
            stmt = stmt.where(posts_table.c.category == category)

        stmt = stmt.order_by(desc(posts_table.c.id))

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_bookmarked_by(self, user_id: UserId) -> List[Post]:
        """Find posts a user has bookmarked, most recent bookmark first."""
        source = posts_table.join(
            bookmarks_table, bookmarks_table.c.post_id == posts_table.c.id
        )
        stmt = (
            _posts_with_likes(source)
            .where(bookmarks_table.c.user_id == user_id)
            .group_by(bookmarks_table.c.id)
            .order_by(desc(bookmarks_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (dependents cascade in the database)."""
        stmt = (
            delete(posts_table)
            .where(posts_table.c.id == post_id)
            .returning(posts_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted
