"""Integration tests for PostgresCommentRepository.

Needs PostgreSQL at DATABASE__URL; skipped when it isn't reachable.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
)
from forum.domain.value import LikeableType, NotificationType, UserId
from forum.persistence.tables import comment_likes_table
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL repositories
integration_env = create_env_fixture(unmock={"persistence"})


async def _post(env):
    posts = await env.get(PostRepository)
    return await posts.create("Title", "Body", UserId("author"), tags=[])


class TestDeleteSubtree:
    """The recursive delete removes a whole branch and nothing else."""

    @pytest.mark.asyncio
    async def test_removes_descendants_and_keeps_siblings(self, integration_env):
        # Arrange
        comments = await integration_env.get(CommentRepository)
        post = await _post(integration_env)
        root = await comments.create(post.id, UserId("u1"), "root")
        branch = await comments.create(post.id, UserId("u2"), "branch", root.id)
        deeper = await comments.create(post.id, UserId("u3"), "deeper", branch.id)
        deepest = await comments.create(post.id, UserId("u4"), "deepest", deeper.id)
        sibling = await comments.create(post.id, UserId("u5"), "sibling", root.id)
        other = await comments.create(post.id, UserId("u6"), "other top-level")

        # Act
        deleted = await comments.delete_subtree(branch.id)

        # Assert
        assert sorted(deleted) == sorted([branch.id, deeper.id, deepest.id])
        remaining = await comments.find_by_post(post.id)
        assert [c.id for c in remaining] == [root.id, sibling.id, other.id]

    @pytest.mark.asyncio
    async def test_second_delete_is_a_no_op(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        post = await _post(integration_env)
        root = await comments.create(post.id, UserId("u1"), "root")
        await comments.create(post.id, UserId("u2"), "reply", root.id)

        first = await comments.delete_subtree(root.id)
        second = await comments.delete_subtree(root.id)

        assert len(first) == 2
        assert second == []
        assert await comments.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_unknown_root_deletes_nothing(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        post = await _post(integration_env)
        kept = await comments.create(post.id, UserId("u1"), "kept")

        assert await comments.delete_subtree(kept.id + 1000) == []
        assert await comments.find_by_id(kept.id) is not None

    @pytest.mark.asyncio
    async def test_cascades_to_likes_and_notifications(self, integration_env):
        """Likes and notifications of deleted comments go with them."""
        # Arrange
        comments = await integration_env.get(CommentRepository)
        likes = await integration_env.get(LikeRepository)
        notifications = await integration_env.get(NotificationRepository)
        session = await integration_env.get(AsyncSession)
        post = await _post(integration_env)
        root = await comments.create(post.id, UserId("u1"), "root")
        reply = await comments.create(post.id, UserId("u2"), "reply", root.id)
        await likes.add(LikeableType.COMMENT, reply.id, UserId("u3"))
        await notifications.create(
            UserId("u1"), NotificationType.REPLY, post.id, reply.id
        )

        # Act
        await comments.delete_subtree(root.id)

        # Assert
        assert await notifications.find_by_user(UserId("u1")) == []
        remaining_likes = await session.scalar(
            select(func.count()).select_from(comment_likes_table)
        )
        assert remaining_likes == 0


class TestLikeAggregation:
    """Comments come back with likers aggregated in like order."""

    @pytest.mark.asyncio
    async def test_unliked_comment_has_empty_likes(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        post = await _post(integration_env)
        created = await comments.create(post.id, UserId("u1"), "quiet")

        found = await comments.find_by_id(created.id)

        assert found is not None
        assert found.likes == []

    @pytest.mark.asyncio
    async def test_likes_keep_like_order(self, integration_env):
        # Arrange
        comments = await integration_env.get(CommentRepository)
        likes = await integration_env.get(LikeRepository)
        post = await _post(integration_env)
        created = await comments.create(post.id, UserId("u1"), "popular")

        # Act
        await likes.add(LikeableType.COMMENT, created.id, UserId("zed"))
        await likes.add(LikeableType.COMMENT, created.id, UserId("amy"))
        await likes.add(LikeableType.COMMENT, created.id, UserId("kim"))
        await likes.remove(LikeableType.COMMENT, created.id, UserId("amy"))

        # Assert
        found = await comments.find_by_id(created.id)
        assert found.likes == ["zed", "kim"]
        (listed,) = await comments.find_by_post(post.id)
        assert listed.likes == ["zed", "kim"]


class TestThreadQueries:
    @pytest.mark.asyncio
    async def test_top_level_pages_and_children(self, integration_env):
        comments = await integration_env.get(CommentRepository)
        post = await _post(integration_env)
        first = await comments.create(post.id, UserId("u1"), "first")
        second = await comments.create(post.id, UserId("u2"), "second")
        third = await comments.create(post.id, UserId("u3"), "third")
        reply = await comments.create(post.id, UserId("u4"), "reply", second.id)

        page = await comments.find_top_level(post.id, limit=2, offset=1)
        children = await comments.find_children_of([first.id, second.id])

        assert [c.id for c in page] == [second.id, third.id]
        assert [c.id for c in children] == [reply.id]
        assert await comments.find_children_of([]) == []
