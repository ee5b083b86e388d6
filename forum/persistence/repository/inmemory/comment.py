"""In-memory comment repository for testing."""

from typing import Collection, List, Optional

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, UserId
from forum.persistence.mappers import row_to_comment

from .database import InMemoryDatabase, Row


def _thread_order(row: Row) -> tuple:
    return (row["created_at"], row["id"])


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _to_comments(self, rows: list[Row]) -> List[Comment]:
        return [
            row_to_comment({**row, "likes": self.db.comment_likers(row["id"])})
            for row in sorted(rows, key=_thread_order)
        ]

    async def create(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        Raises:
            IntegrityError: If the post or parent comment doesn't exist
        """
        self.db.require("posts", post_id)
        self.db.require("comments", parent_id)

        row = {
            "id": self.db.next_id("comments"),
            "post_id": post_id,
            "user_id": user_id,
            "content": content,
            "parent_id": parent_id,
            "created_at": self.db.now(),
        }
        self.db.comments[row["id"]] = row
        return self._to_comments([row])[0]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        row = self.db.comments.get(comment_id)
        return self._to_comments([row])[0] if row else None

    async def find_top_level(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find one page of top-level comments for a post."""
        rows = [
            r
            for r in self.db.comments.values()
            if r["post_id"] == post_id and r["parent_id"] is None
        ]
        return self._to_comments(rows)[offset : offset + limit]

    async def find_children_of(self, parent_ids: Collection[CommentId]) -> List[Comment]:
        """Find direct replies to any of the given comments."""
        if not parent_ids:
            return []
        wanted = set(parent_ids)
        return self._to_comments(
            [r for r in self.db.comments.values() if r["parent_id"] in wanted]
        )

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment on a post, at any depth."""
        return self._to_comments(
            [r for r in self.db.comments.values() if r["post_id"] == post_id]
        )

    async def delete_subtree(self, root_id: CommentId) -> List[CommentId]:
        """Delete a comment and all its descendants."""
        doomed = self.db.descendants(root_id)
        self.db.delete_comments(doomed)
        return [CommentId(comment_id) for comment_id in doomed]
