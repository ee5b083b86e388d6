"""Post domain service."""

import logfire

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model.post import Post
from forum.domain.repository import BookmarkRepository, PostRepository
from forum.domain.value import PostId, UserId

from .base import Service
from .like_service import toggle_membership


class PostService(Service):
    """Domain service for posts and bookmarks."""

    def __init__(
        self,
        post_repository: PostRepository,
        bookmark_repository: BookmarkRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            bookmark_repository: Bookmark repository
        """
        self.post_repository = post_repository
        self.bookmark_repository = bookmark_repository

    async def create_post(
        self,
        title: str,
        content: str,
        user_id: UserId,
        tags: list[str] | None = None,
        category: str | None = None,
    ) -> Post:
        """Create a post.

        Args:
            title: Post title
            content: Post body
            user_id: Author user ID
            tags: Free-form tags
            category: Optional category

        Returns:
            Created post

        Raises:
            ValidationError: If title or content is empty
        """
        with logfire.span("post_service.create_post", user_id=user_id):
            if not title or not title.strip():
                raise ValidationError("Post title must not be empty")
            if not content or not content.strip():
                raise ValidationError("Post content must not be empty")

            # Keep first occurrence, drop blanks and repeats
            unique_tags = list(dict.fromkeys(t.strip() for t in tags or [] if t.strip()))

            post = await self.post_repository.create(
                title=title,
                content=content,
                user_id=user_id,
                tags=unique_tags,
                category=category or None,
            )
            logfire.info("Post created", post_id=post.id, user_id=user_id)
            return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(
        self,
        user_id: UserId | None = None,
        tag: str | None = None,
        category: str | None = None,
    ) -> list[Post]:
        """List posts, newest first.

        Args:
            user_id: Only posts by this author
            tag: Only posts with this tag
            category: Only posts in this category

        Returns:
            Matching posts
        """
        with logfire.span(
            "post_service.list_posts", user_id=user_id, tag=tag, category=category
        ):
            posts = await self.post_repository.find_all(
                user_id=user_id, tag=tag, category=category
            )
            logfire.info("Posts retrieved", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post with its comments, likes, bookmarks and notifications.

        Returns:
            True if the post existed
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post delete", post_id=post_id, deleted=deleted)
            return deleted

    async def toggle_bookmark(self, post_id: PostId, user_id: UserId) -> bool:
        """Bookmark a post, or remove the bookmark if it exists.

        Returns:
            True if the post is now bookmarked

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "post_service.toggle_bookmark", post_id=post_id, user_id=user_id
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Bookmark on non-existent post", post_id=post_id)
                raise NotFoundError("Post", str(post_id))

            current = await self.bookmark_repository.find_user_ids(post_id)
            bookmarked = user_id in toggle_membership(current, user_id)
            if bookmarked:
                await self.bookmark_repository.add(user_id, post_id)
            else:
                await self.bookmark_repository.remove(user_id, post_id)

            logfire.info(
                "Bookmark toggled",
                post_id=post_id,
                user_id=user_id,
                bookmarked=bookmarked,
            )
            return bookmarked

    async def list_bookmarked_posts(self, user_id: UserId) -> list[Post]:
        """List posts a user bookmarked, most recent bookmark first."""
        with logfire.span("post_service.list_bookmarked_posts", user_id=user_id):
            return await self.post_repository.find_bookmarked_by(user_id)
