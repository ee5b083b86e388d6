"""Unit tests for ToggleLikeUseCase."""

import pytest

from forum.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from forum.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from forum.domain.error import NotFoundError
from forum.domain.service import PostService
from forum.domain.value import LikeableType
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_post_like(self, unit_env, make_post):
        """Liking then unliking a post flips ``liked``."""
        # Arrange
        use_case = await unit_env.get(ToggleLikeUseCase)
        post = await make_post(await unit_env.get(PostService))
        request = ToggleLikeRequest(
            likeable_type=LikeableType.POST, likeable_id=post.id, user_id="u1"
        )

        # Act
        liked = await use_case.execute(request)
        unliked = await use_case.execute(request)

        # Assert
        assert liked.liked is True
        assert liked.likes == ["u1"]
        assert liked.post is not None
        assert liked.post.post_id == post.id
        assert liked.post.title == post.title
        assert liked.post.likes == ["u1"]
        assert liked.comment is None
        assert unliked.liked is False
        assert unliked.likes == []
        assert unliked.post.likes == []

    @pytest.mark.asyncio
    async def test_toggle_comment_like(self, unit_env, make_post):
        use_case = await unit_env.get(ToggleLikeUseCase)
        create = await unit_env.get(CreateCommentUseCase)
        post = await make_post(await unit_env.get(PostService))
        comment = await create.execute(
            CreateCommentRequest(post_id=post.id, user_id="u2", content="hi")
        )

        result = await use_case.execute(
            ToggleLikeRequest(
                likeable_type=LikeableType.COMMENT,
                likeable_id=comment.comment_id,
                user_id="u1",
            )
        )

        assert result.likeable_type == LikeableType.COMMENT
        assert result.likes == ["u1"]
        assert result.post is None
        assert result.comment.comment_id == comment.comment_id
        assert result.comment.content == "hi"
        assert result.comment.likes == ["u1"]

    @pytest.mark.asyncio
    async def test_missing_target(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleLikeRequest(
                    likeable_type=LikeableType.COMMENT, likeable_id=1, user_id="u1"
                )
            )
