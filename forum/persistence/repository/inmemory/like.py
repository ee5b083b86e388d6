"""In-memory like repository for testing."""

from forum.domain.repository import LikeRepository
from forum.domain.value import LikeableType, UserId

from .database import InMemoryDatabase, Row


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _relation(self, likeable_type: LikeableType) -> tuple[str, str, str]:
        """Like table, its entity column and the referenced table."""
        if likeable_type == LikeableType.POST:
            return "post_likes", "post_id", "posts"
        return "comment_likes", "comment_id", "comments"

    async def add(
        self, likeable_type: LikeableType, likeable_id: int, user_id: UserId
    ) -> bool:
        """Record a like; repeats are a no-op.

        Raises:
            IntegrityError: If the liked entity doesn't exist
        """
        table, column, target = self._relation(likeable_type)
        self.db.require(target, likeable_id)

        likes: list[Row] = getattr(self.db, table)
        if any(r[column] == likeable_id and r["user_id"] == user_id for r in likes):
            return False

        likes.append(
            {"id": self.db.next_id(table), column: likeable_id, "user_id": user_id}
        )
        return True

    async def remove(
        self, likeable_type: LikeableType, likeable_id: int, user_id: UserId
    ) -> bool:
        """Remove a like."""
        table, column, _ = self._relation(likeable_type)
        likes: list[Row] = getattr(self.db, table)
        for i, row in enumerate(likes):
            if row[column] == likeable_id and row["user_id"] == user_id:
                likes.pop(i)
                return True
        return False
