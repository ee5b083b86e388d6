"""Unit tests for the in-memory store's constraint and cascade behavior."""

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
)
from forum.domain.value import (
    CommentId,
    LikeableType,
    NotificationType,
    PostId,
    UserId,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestInMemoryConstraints:
    """Foreign keys and unique pairs."""

    @pytest.mark.asyncio
    async def test_comment_requires_post(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(IntegrityError):
            await comment_repo.create(PostId(1), UserId("u1"), "hi")

    @pytest.mark.asyncio
    async def test_notification_requires_comment(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        post = await post_repo.create("t", "c", UserId("u1"), [])

        with pytest.raises(IntegrityError):
            await notification_repo.create(
                UserId("u1"), NotificationType.COMMENT, post.id, CommentId(99)
            )

    @pytest.mark.asyncio
    async def test_like_pairs_are_unique(self, unit_env):
        """Adding the same like twice stores it once."""
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.create("t", "c", UserId("u1"), [])

        assert await like_repo.add(LikeableType.POST, post.id, UserId("u2")) is True
        assert await like_repo.add(LikeableType.POST, post.id, UserId("u2")) is False

        stored = await post_repo.find_by_id(post.id)
        assert stored.likes == ["u2"]
        assert await like_repo.remove(LikeableType.POST, post.id, UserId("u2")) is True
        assert await like_repo.remove(LikeableType.POST, post.id, UserId("u2")) is False

    @pytest.mark.asyncio
    async def test_bookmark_pairs_are_unique(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        bookmark_repo = await unit_env.get(BookmarkRepository)
        post = await post_repo.create("t", "c", UserId("u1"), [])

        assert await bookmark_repo.add(UserId("u2"), post.id) is True
        assert await bookmark_repo.add(UserId("u2"), post.id) is False
        assert await bookmark_repo.find_user_ids(post.id) == ["u2"]


class TestInMemoryCommentQueries:
    """Ordering and filtering of comment reads."""

    @pytest.mark.asyncio
    async def test_children_of_empty_collection(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)

        assert await comment_repo.find_children_of([]) == []

    @pytest.mark.asyncio
    async def test_top_level_excludes_replies(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.create("t", "c", UserId("u1"), [])
        top = await comment_repo.create(post.id, UserId("u2"), "top")
        await comment_repo.create(post.id, UserId("u3"), "reply", parent_id=top.id)

        result = await comment_repo.find_top_level(post.id, limit=10, offset=0)

        assert [c.id for c in result] == [top.id]

    @pytest.mark.asyncio
    async def test_delete_unknown_subtree(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)

        assert await comment_repo.delete_subtree(CommentId(123)) == []
