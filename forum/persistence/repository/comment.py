"""PostgreSQL implementation of Comment repository."""

from typing import Collection, List, Optional

from sqlalchemy import FromClause, Select, delete, func, insert, null, select
from sqlalchemy.dialects.postgresql import aggregate_order_by
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, UserId
from forum.persistence.mappers import row_to_comment
from forum.persistence.tables import comment_likes_table, comments_table


def _comments_with_likes() -> Select:
    """Select comments with their likers aggregated into a ``likes`` array.

    The LEFT JOIN yields one NULL row for unliked comments, which
    array_remove strips back out to an empty array.
    """
    likes = func.array_remove(
        func.array_agg(
            aggregate_order_by(comment_likes_table.c.user_id, comment_likes_table.c.id)
        ),
        null(),
    ).label("likes")
    source: FromClause = comments_table.outerjoin(
        comment_likes_table, comment_likes_table.c.comment_id == comments_table.c.id
    )
    return select(comments_table, likes).select_from(source).group_by(comments_table.c.id)


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment."""
        stmt = (
            insert(comments_table)
            .values(
                post_id=post_id,
                user_id=user_id,
                content=content,
                parent_id=parent_id,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.one()
        await self.session.flush()
        # A fresh comment has no likes yet
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = _comments_with_likes().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find one page of top-level comments for a post."""
        stmt = (
            _comments_with_likes()
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children_of(self, parent_ids: Collection[CommentId]) -> List[Comment]:
        """Find direct replies to any of the given comments."""
        if not parent_ids:
            return []

        stmt = (
            _comments_with_likes()
            .where(comments_table.c.parent_id.in_(list(parent_ids)))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment on a post, at any depth."""
        stmt = (
            _comments_with_likes()
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def delete_subtree(self, root_id: CommentId) -> List[CommentId]:
        """Delete a comment and all its descendants in one statement.

        Walks parent_id links with a recursive CTE and deletes the collected
        ids in a single DELETE, so the subtree goes all at once or not at all.
        """
        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.id == root_id)
            .cte("subtree", recursive=True)
        )
        descendants = select(comments_table.c.id).join(
            subtree, comments_table.c.parent_id == subtree.c.id
        )
        subtree = subtree.union_all(descendants)

        stmt = (
            delete(comments_table)
            .where(comments_table.c.id.in_(select(subtree.c.id)))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = [CommentId(row.id) for row in result.fetchall()]
        await self.session.flush()
        return deleted
