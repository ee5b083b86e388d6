"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.post import Post
from forum.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Every read returns posts annotated with their like lists.
    """

    @abstractmethod
    async def create(
        self,
        title: str,
        content: str,
        user_id: UserId,
        tags: List[str],
        category: Optional[str] = None,
    ) -> Post:
        """Insert a new post.

        Returns:
            The stored post with its generated id and timestamp
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        user_id: Optional[UserId] = None,
        tag: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Post]:
        """Find posts, newest first, optionally filtered.

        Args:
            user_id: Only posts by this author
            tag: Only posts carrying this tag
            category: Only posts in this category

        Returns:
            Matching posts ordered by id descending
        """
        pass

    @abstractmethod
    async def find_bookmarked_by(self, user_id: UserId) -> List[Post]:
        """Find posts a user has bookmarked, most recent bookmark first.

        Args:
            user_id: The bookmarking user

        Returns:
            Bookmarked posts
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Comments, likes and bookmarks go with it.

        Args:
            post_id: The post ID

        Returns:
            True if a post was deleted
        """
        pass
