"""In-memory post repository for testing."""

from typing import List, Optional

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId
from forum.persistence.mappers import row_to_post

from .database import InMemoryDatabase, Row


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _to_post(self, row: Row) -> Post:
        return row_to_post({**row, "likes": self.db.post_likers(row["id"])})

    async def create(
        self,
        title: str,
        content: str,
        user_id: UserId,
        tags: List[str],
        category: Optional[str] = None,
    ) -> Post:
        """Insert a new post."""
        row = {
            "id": self.db.next_id("posts"),
            "title": title,
            "content": content,
            "user_id": user_id,
            "tags": list(tags),
            "category": category,
            "created_at": self.db.now(),
        }
        self.db.posts[row["id"]] = row
        return self._to_post(row)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        row = self.db.posts.get(post_id)
        return self._to_post(row) if row else None

    async def find_all(
        self,
        user_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Post]:
        """Find posts, newest first, optionally filtered."""
        rows = list(self.db.posts.values())

        if user_id is not None:
            rows = [r for r in rows if r["user_id"] == user_id]
        if tag is not None:
            rows = [r for r in rows if tag in r["tags"]]
        if category is not None:
            rows = [r for r in rows if r["category"] == category]

        rows.sort(key=lambda r: r["id"], reverse=True)
        return [self._to_post(r) for r in rows]

    async def find_bookmarked_by(self, user_id: UserId) -> List[Post]:
        """Find posts a user has bookmarked, most recent bookmark first."""
        bookmarks = sorted(
            (b for b in self.db.bookmarks if b["user_id"] == user_id),
            key=lambda b: b["id"],
            reverse=True,
        )
        return [self._to_post(self.db.posts[b["post_id"]]) for b in bookmarks]

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its dependents."""
        return self.db.delete_post(post_id)
