"""Integration tests for PostgresLikeRepository."""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import LikeRepository, PostRepository
from forum.domain.service import LikeService
from forum.domain.value import LikeableType, PostId, UserId
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL repositories
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresLikeRepository:
    """Guarded insert and delete on the like relations."""

    @pytest.mark.asyncio
    async def test_repeated_add_is_ignored(self, integration_env):
        # Arrange
        posts = await integration_env.get(PostRepository)
        likes = await integration_env.get(LikeRepository)
        post = await posts.create("Title", "Body", UserId("author"), tags=[])

        # Act
        first = await likes.add(LikeableType.POST, post.id, UserId("u1"))
        second = await likes.add(LikeableType.POST, post.id, UserId("u1"))

        # Assert
        assert first is True
        assert second is False
        found = await posts.find_by_id(post.id)
        assert found.likes == ["u1"]

    @pytest.mark.asyncio
    async def test_remove_reports_whether_a_like_existed(self, integration_env):
        posts = await integration_env.get(PostRepository)
        likes = await integration_env.get(LikeRepository)
        post = await posts.create("Title", "Body", UserId("author"), tags=[])
        await likes.add(LikeableType.POST, post.id, UserId("u1"))

        assert await likes.remove(LikeableType.POST, post.id, UserId("u1")) is True
        assert await likes.remove(LikeableType.POST, post.id, UserId("u1")) is False
        assert (await posts.find_by_id(post.id)).likes == []

    @pytest.mark.asyncio
    async def test_post_likes_in_like_order(self, integration_env):
        posts = await integration_env.get(PostRepository)
        likes = await integration_env.get(LikeRepository)
        post = await posts.create("Title", "Body", UserId("author"), tags=["x"])

        for user in ("u3", "u1", "u2"):
            await likes.add(LikeableType.POST, post.id, UserId(user))

        assert (await posts.find_by_id(post.id)).likes == ["u3", "u1", "u2"]
        (listed,) = await posts.find_all(tag="x")
        assert listed.likes == ["u3", "u1", "u2"]

    @pytest.mark.asyncio
    async def test_like_on_missing_post_violates_foreign_key(self, integration_env):
        likes = await integration_env.get(LikeRepository)
        session = await integration_env.get(AsyncSession)

        with pytest.raises(IntegrityError):
            await likes.add(LikeableType.POST, PostId(4242), UserId("u1"))
        await session.rollback()

    @pytest.mark.asyncio
    async def test_service_toggle_round_trip(self, integration_env):
        posts = await integration_env.get(PostRepository)
        like_service = await integration_env.get(LikeService)
        post = await posts.create("Title", "Body", UserId("author"), tags=[])

        liked = await like_service.toggle_post_like(post.id, UserId("u1"))
        unliked = await like_service.toggle_post_like(post.id, UserId("u1"))

        assert liked.likes == ["u1"]
        assert unliked.likes == []
