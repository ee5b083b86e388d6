"""Unit tests for PostService."""

import pytest

from forum.domain.error import NotFoundError, ValidationError
from forum.domain.repository import NotificationRepository
from forum.domain.service import CommentService, PostService
from forum.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_cleans_tags(self, unit_env):
        """Tags are stripped, blanks dropped and repeats collapsed."""
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act
        post = await post_service.create_post(
            title="Hello",
            content="World",
            user_id=UserId("u1"),
            tags=[" python ", "python", "", "asyncio"],
            category="dev",
        )

        # Assert
        assert post.tags == ["python", "asyncio"]
        assert post.category == "dev"
        assert post.likes == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title,content", [("", "body"), ("title", "  ")])
    async def test_empty_fields_rejected(self, unit_env, title, content):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(title, content, UserId("u1"))


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_filters_and_order(self, unit_env, make_post):
        """Posts come newest first and filters combine."""
        # Arrange
        post_service = await unit_env.get(PostService)
        a = await make_post(post_service, user_id="u1", tags=["x"], category="news")
        b = await make_post(post_service, user_id="u2", tags=["x", "y"])
        c = await make_post(post_service, user_id="u1", tags=["y"], category="news")

        # Act / Assert
        assert [p.id for p in await post_service.list_posts()] == [c.id, b.id, a.id]
        assert [p.id for p in await post_service.list_posts(user_id=UserId("u1"))] == [
            c.id,
            a.id,
        ]
        assert [p.id for p in await post_service.list_posts(tag="x")] == [b.id, a.id]
        assert [p.id for p in await post_service.list_posts(category="news")] == [
            c.id,
            a.id,
        ]
        assert await post_service.list_posts(tag="nope") == []

    @pytest.mark.asyncio
    async def test_get_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.get_post(PostId(1))


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_delete_cascades(self, unit_env, make_post):
        """Comments, bookmarks and notifications go with the post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        post = await make_post(post_service, user_id="u1")
        await comment_service.create_comment(post.id, UserId("u2"), "hi")
        await post_service.toggle_bookmark(post.id, UserId("u3"))

        # Act
        deleted = await post_service.delete_post(post.id)

        # Assert
        assert deleted is True
        assert await comment_service.get_full_thread(post.id) == []
        assert await post_service.list_bookmarked_posts(UserId("u3")) == []
        assert await notification_repo.find_by_user(UserId("u1")) == []
        assert await post_service.delete_post(post.id) is False


class TestBookmarks:
    """Tests for toggle_bookmark and list_bookmarked_posts."""

    @pytest.mark.asyncio
    async def test_toggle_and_list(self, unit_env, make_post):
        """Bookmarks toggle and list most recent first."""
        post_service = await unit_env.get(PostService)
        first = await make_post(post_service, title="First")
        second = await make_post(post_service, title="Second")

        assert await post_service.toggle_bookmark(second.id, UserId("u1")) is True
        assert await post_service.toggle_bookmark(first.id, UserId("u1")) is True

        listed = await post_service.list_bookmarked_posts(UserId("u1"))
        assert [p.id for p in listed] == [first.id, second.id]

        assert await post_service.toggle_bookmark(first.id, UserId("u1")) is False
        listed = await post_service.list_bookmarked_posts(UserId("u1"))
        assert [p.id for p in listed] == [second.id]

    @pytest.mark.asyncio
    async def test_bookmark_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.toggle_bookmark(PostId(5), UserId("u1"))
