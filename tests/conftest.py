"""Test configuration and fixtures."""

import logfire
import pytest

from forum.domain.model import Post
from forum.domain.service import PostService
from forum.domain.value import UserId


def pytest_configure(config):
    # Keep spans local and quiet during tests
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def make_post():
    """Factory fixture that stores a post through a PostService."""

    async def _make_post(
        post_service: PostService,
        user_id: str = "author",
        title: str = "A post",
        content: str = "Post body",
        tags: list[str] | None = None,
        category: str | None = None,
    ) -> Post:
        return await post_service.create_post(
            title=title,
            content=content,
            user_id=UserId(user_id),
            tags=tags,
            category=category,
        )

    return _make_post
