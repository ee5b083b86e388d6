"""Like repository interface."""

from abc import ABC, abstractmethod

from forum.domain.value import LikeableType, UserId


class LikeRepository(ABC):
    """Repository for like membership on posts and comments.

    Likes are (entity, user) pairs guarded by a uniqueness constraint, so
    adding and removing are single atomic statements. Reading likes goes
    through the post and comment repositories, which annotate every entity
    they return.
    """

    @abstractmethod
    async def add(
        self, likeable_type: LikeableType, likeable_id: int, user_id: UserId
    ) -> bool:
        """Record a like. Existing pairs are left alone.

        Args:
            likeable_type: Post or comment
            likeable_id: ID of the entity
            user_id: Liking user

        Returns:
            True if a new like was stored, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(
        self, likeable_type: LikeableType, likeable_id: int, user_id: UserId
    ) -> bool:
        """Remove a like.

        Args:
            likeable_type: Post or comment
            likeable_id: ID of the entity
            user_id: User whose like is removed

        Returns:
            True if a like was removed, False if none existed
        """
        pass
