"""Bookmark repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.value import PostId, UserId


class BookmarkRepository(ABC):
    """Repository for bookmarks, unique per (user, post)."""

    @abstractmethod
    async def find_user_ids(self, post_id: PostId) -> List[UserId]:
        """List users who bookmarked a post."""
        pass

    @abstractmethod
    async def add(self, user_id: UserId, post_id: PostId) -> bool:
        """Bookmark a post. Existing bookmarks are left alone.

        Returns:
            True if a new bookmark was stored
        """
        pass

    @abstractmethod
    async def remove(self, user_id: UserId, post_id: PostId) -> bool:
        """Remove a bookmark.

        Returns:
            True if a bookmark was removed
        """
        pass
