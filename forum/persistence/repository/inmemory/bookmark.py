"""In-memory bookmark repository for testing."""

from typing import List

from forum.domain.repository import BookmarkRepository
from forum.domain.value import PostId, UserId

from .database import InMemoryDatabase


class InMemoryBookmarkRepository(BookmarkRepository):
    """In-memory implementation of BookmarkRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_user_ids(self, post_id: PostId) -> List[UserId]:
        """List users who bookmarked a post."""
        return [UserId(b["user_id"]) for b in self.db.bookmarks if b["post_id"] == post_id]

    async def add(self, user_id: UserId, post_id: PostId) -> bool:
        """Bookmark a post; repeats are a no-op.

        Raises:
            IntegrityError: If the post doesn't exist
        """
        self.db.require("posts", post_id)
        if any(
            b["user_id"] == user_id and b["post_id"] == post_id for b in self.db.bookmarks
        ):
            return False

        self.db.bookmarks.append(
            {
                "id": self.db.next_id("bookmarks"),
                "user_id": user_id,
                "post_id": post_id,
                "created_at": self.db.now(),
            }
        )
        return True

    async def remove(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a bookmark."""
        before = len(self.db.bookmarks)
        self.db.bookmarks = [
            b
            for b in self.db.bookmarks
            if not (b["user_id"] == user_id and b["post_id"] == post_id)
        ]
        return len(self.db.bookmarks) < before
