"""Like domain service."""

from typing import Iterable

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Comment, Post
from forum.domain.repository import CommentRepository, LikeRepository, PostRepository
from forum.domain.value import CommentId, LikeableType, PostId, UserId

from .base import Service


def toggle_membership(members: Iterable[UserId], user_id: UserId) -> set[UserId]:
    """Flip a user's membership in a set.

    Removes ``user_id`` if present, adds it otherwise. Applying it twice with
    the same user gives back the original membership.

    Args:
        members: Current members
        user_id: User to flip

    Returns:
        New membership (the input is not modified)
    """
    updated = set(members)
    if user_id in updated:
        updated.discard(user_id)
    else:
        updated.add(user_id)
    return updated


class LikeService(Service):
    """Domain service for liking posts and comments.

    Both posts and comments keep likes in a (entity, user) relation with a
    uniqueness constraint, so each toggle ends in one atomic insert or delete.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def toggle_post_like(self, post_id: PostId, user_id: UserId) -> Post:
        """Like a post, or unlike it if the user already does.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            The post with its current likes

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "like_service.toggle_post_like", post_id=post_id, user_id=user_id
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Like on non-existent post", post_id=post_id)
                raise NotFoundError("Post", str(post_id))

            await self._apply_toggle(LikeableType.POST, post_id, post.likes, user_id)

            updated = await self.post_repository.find_by_id(post_id)
            if updated is None:
                raise NotFoundError("Post", str(post_id))
            return updated

    async def toggle_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        """Like a comment, or unlike it if the user already does.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            The comment with its current likes

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "like_service.toggle_comment_like", comment_id=comment_id, user_id=user_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Like on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            await self._apply_toggle(
                LikeableType.COMMENT, comment_id, comment.likes, user_id
            )

            updated = await self.comment_repository.find_by_id(comment_id)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            return updated

    async def _apply_toggle(
        self,
        likeable_type: LikeableType,
        likeable_id: int,
        current: Iterable[UserId],
        user_id: UserId,
    ) -> bool:
        """Persist the toggled membership for one user.

        Returns:
            True if the user now likes the entity
        """
        liked = user_id in toggle_membership(current, user_id)
        if liked:
            await self.like_repository.add(likeable_type, likeable_id, user_id)
        else:
            await self.like_repository.remove(likeable_type, likeable_id, user_id)

        logfire.info(
            "Like toggled",
            likeable_type=likeable_type.value,
            likeable_id=likeable_id,
            user_id=user_id,
            liked=liked,
        )
        return liked
