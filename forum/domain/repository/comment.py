"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Every read returns comments annotated with their like lists.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        Args:
            post_id: Post the comment belongs to
            user_id: Author
            content: Comment body
            parent_id: Parent comment for replies (None for top-level)

        Returns:
            The stored comment with its generated id and timestamp
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self, post_id: PostId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find one page of top-level comments for a post.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Top-level comments, oldest first
        """
        pass

    @abstractmethod
    async def find_children_of(self, parent_ids: Collection[CommentId]) -> List[Comment]:
        """Find direct replies to any of the given comments.

        An empty collection returns an empty list without touching the store.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies, oldest first
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find every comment on a post, at any depth.

        Args:
            post_id: The post ID

        Returns:
            All comments, oldest first
        """
        pass

    @abstractmethod
    async def delete_subtree(self, root_id: CommentId) -> List[CommentId]:
        """Delete a comment and all of its descendants atomically.

        Deleting an unknown id is a no-op.

        Args:
            root_id: Comment at the top of the subtree

        Returns:
            IDs of every deleted comment
        """
        pass
