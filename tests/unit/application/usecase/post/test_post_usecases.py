"""Unit tests for post and bookmark use cases."""

import pytest

from forum.application.usecase.bookmark import (
    ListBookmarksRequest,
    ListBookmarksUseCase,
    ToggleBookmarkRequest,
    ToggleBookmarkUseCase,
)
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestPostUseCases:
    """Tests for post listing and bookmarks."""

    @pytest.mark.asyncio
    async def test_list_by_author(self, unit_env):
        # Arrange
        create = await unit_env.get(CreatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        mine = await create.execute(
            CreatePostRequest(title="Mine", content="body", user_id="u1", tags=["a"])
        )
        await create.execute(CreatePostRequest(title="Theirs", content="b", user_id="u2"))

        # Act
        result = await list_posts.execute(ListPostsRequest(user_id="u1"))

        # Assert
        assert result.total == 1
        assert result.posts[0].post_id == mine.post_id
        assert result.posts[0].tags == ["a"]

    @pytest.mark.asyncio
    async def test_bookmark_flow(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        toggle = await unit_env.get(ToggleBookmarkUseCase)
        list_bookmarks = await unit_env.get(ListBookmarksUseCase)
        post = await create.execute(
            CreatePostRequest(title="Save me", content="body", user_id="u1")
        )

        toggled = await toggle.execute(
            ToggleBookmarkRequest(post_id=post.post_id, user_id="u2")
        )
        listed = await list_bookmarks.execute(ListBookmarksRequest(user_id="u2"))

        assert toggled.bookmarked is True
        assert [p.post_id for p in listed.posts] == [post.post_id]
