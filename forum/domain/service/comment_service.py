"""Comment domain service."""

from typing import Any

import logfire

from forum.config import PaginationSettings
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.comment import Comment
from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.value import CommentId, Page, PostId, UserId

from .base import Service
from .comment_tree import CommentNode, build_one_level, build_unlimited
from .notification_service import NotificationService


class CommentService(Service):
    """Domain service for comment threads.

    Creates comments (fanning out notifications), serves threads in paginated
    one-level and unlimited-depth shapes, and deletes whole subtrees.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            notification_service: Notification domain service
            pagination: Thread pagination defaults
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.notification_service = notification_service
        self.pagination = pagination

    async def create_comment(
        self,
        post_id: PostId,
        user_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        After the comment is stored, the post author (top-level comment) or
        parent author (reply) is notified unless they wrote it themselves.
        Notification problems never fail the comment.

        Args:
            post_id: Post ID
            user_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty, the post doesn't exist, or
                the parent comment is missing or on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            user_id=user_id,
            parent_id=parent_id,
        ):
            if not content or not content.strip():
                raise ValidationError("Comment content must not be empty")

            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Comment on non-existent post", post_id=post_id)
                raise ValidationError(f"Post not found: {post_id}")

            parent = None
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=parent_id,
                        post_id=post_id,
                    )
                    raise ValidationError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=parent_id,
                        parent_post_id=parent.post_id,
                        target_post_id=post_id,
                    )
                    raise ValidationError("Parent comment does not belong to this post")

            comment = await self.comment_repository.create(
                post_id=post_id,
                user_id=user_id,
                content=content,
                parent_id=parent_id,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=post_id,
                is_reply=parent_id is not None,
            )

            await self.notification_service.notify_for_comment(
                comment, parent=parent, post=post
            )
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment with its likes

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    def coerce_page(self, limit: Any = None, offset: Any = None) -> Page:
        """Normalize client pagination input using the configured defaults."""
        return Page.coerce(
            limit,
            offset,
            default_limit=self.pagination.default_limit,
            max_limit=self.pagination.max_limit,
        )

    async def get_paginated_thread(
        self, post_id: PostId, limit: Any = None, offset: Any = None
    ) -> list[CommentNode]:
        """Get one page of top-level comments with their direct replies.

        Only one level of replies is included; replies to replies are left
        out and can be read with get_full_thread.

        Args:
            post_id: Post ID
            limit: Page size (coerced, see coerce_page)
            offset: Number of top-level comments to skip (coerced)

        Returns:
            Top-level comment nodes, oldest first
        """
        page = self.coerce_page(limit, offset)
        with logfire.span(
            "comment_service.get_paginated_thread",
            post_id=post_id,
            limit=page.limit,
            offset=page.offset,
        ):
            top_level = await self.comment_repository.find_top_level(
                post_id, limit=page.limit, offset=page.offset
            )
            replies: list[Comment] = []
            if top_level:
                replies = await self.comment_repository.find_children_of(
                    [comment.id for comment in top_level]
                )

            logfire.info(
                "Thread page retrieved",
                post_id=post_id,
                top_level=len(top_level),
                replies=len(replies),
            )
            return build_one_level(top_level, replies)

    async def get_full_thread(self, post_id: PostId) -> list[CommentNode]:
        """Get every comment on a post as a reply forest.

        Args:
            post_id: Post ID

        Returns:
            Top-level comment nodes with replies nested at any depth
        """
        with logfire.span("comment_service.get_full_thread", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info("Full thread retrieved", post_id=post_id, count=len(comments))
            return build_unlimited(comments)

    async def delete_comment(self, comment_id: CommentId) -> list[CommentId]:
        """Delete a comment together with all replies beneath it.

        Deleting a comment that doesn't exist succeeds and deletes nothing.
        Likes and notifications of the deleted comments go with them.

        Args:
            comment_id: Comment ID

        Returns:
            IDs of every deleted comment
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            deleted = await self.comment_repository.delete_subtree(comment_id)
            if deleted:
                logfire.info(
                    "Comment subtree deleted", comment_id=comment_id, count=len(deleted)
                )
            else:
                logfire.info("Nothing to delete", comment_id=comment_id)
            return deleted
