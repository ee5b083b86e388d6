"""Unit tests for the comment use cases."""

import json

import pytest

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    GetFullCommentThreadRequest,
    GetFullCommentThreadUseCase,
)
from forum.domain.error import ValidationError
from forum.domain.service import PostService
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCommentUseCases:
    """Create, read and delete through the use case layer."""

    @pytest.mark.asyncio
    async def test_thread_round_trip(self, unit_env, make_post):
        """Created comments show up in both thread shapes."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        get_thread = await unit_env.get(GetCommentThreadUseCase)
        get_full = await unit_env.get(GetFullCommentThreadUseCase)
        post = await make_post(await unit_env.get(PostService))

        top = await create.execute(
            CreateCommentRequest(post_id=post.id, user_id="u2", content="top")
        )
        reply = await create.execute(
            CreateCommentRequest(
                post_id=post.id, user_id="u3", content="reply", parent_id=top.comment_id
            )
        )
        deep = await create.execute(
            CreateCommentRequest(
                post_id=post.id, user_id="u2", content="deep", parent_id=reply.comment_id
            )
        )

        # Act
        page = await get_thread.execute(
            GetCommentThreadRequest(post_id=post.id, limit="abc", offset=None)
        )
        full = await get_full.execute(GetFullCommentThreadRequest(post_id=post.id))

        # Assert
        assert page.limit == 20
        assert page.offset == 0
        assert [c.comment_id for c in page.comments] == [top.comment_id]
        assert [r.comment_id for r in page.comments[0].replies] == [reply.comment_id]
        assert page.comments[0].replies[0].replies == []

        assert full.total == 3
        assert [(c.comment_id, c.depth) for c in full.comments] == [
            (top.comment_id, 0),
            (reply.comment_id, 1),
            (deep.comment_id, 2),
        ]

    @pytest.mark.asyncio
    async def test_full_thread_handles_long_reply_chain(self, unit_env, make_post):
        """A thousand nested replies read and serialize without recursion."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        get_full = await unit_env.get(GetFullCommentThreadUseCase)
        post = await make_post(await unit_env.get(PostService))
        parent_id = None
        for _ in range(1000):
            created = await create.execute(
                CreateCommentRequest(
                    post_id=post.id, user_id="u2", content="again", parent_id=parent_id
                )
            )
            parent_id = created.comment_id

        # Act
        full = await get_full.execute(GetFullCommentThreadRequest(post_id=post.id))
        body = full.render_json()

        # Assert
        assert full.total == 1000
        assert [c.depth for c in full.comments] == list(range(1000))
        assert full.comments[-1].comment_id == parent_id
        assert full.model_dump_json()
        assert body.count('"replies":[') == 1000
        assert body.endswith('"replies":[' + "]}" * 1000 + '],"total":1000}')

    @pytest.mark.asyncio
    async def test_render_json_nests_siblings(self, unit_env, make_post):
        create = await unit_env.get(CreateCommentUseCase)
        get_full = await unit_env.get(GetFullCommentThreadUseCase)
        post = await make_post(await unit_env.get(PostService))
        first = await create.execute(
            CreateCommentRequest(post_id=post.id, user_id="u2", content="first")
        )
        child = await create.execute(
            CreateCommentRequest(
                post_id=post.id, user_id="u3", content="child", parent_id=first.comment_id
            )
        )
        second = await create.execute(
            CreateCommentRequest(post_id=post.id, user_id="u3", content="second")
        )

        full = await get_full.execute(GetFullCommentThreadRequest(post_id=post.id))
        rendered = json.loads(full.render_json())

        assert rendered["post_id"] == post.id
        assert rendered["total"] == 3
        assert [c["comment_id"] for c in rendered["comments"]] == [
            first.comment_id,
            second.comment_id,
        ]
        assert [c["comment_id"] for c in rendered["comments"][0]["replies"]] == [
            child.comment_id
        ]
        assert rendered["comments"][0]["replies"][0]["replies"] == []
        assert rendered["comments"][1]["replies"] == []
        assert "depth" not in rendered["comments"][0]

    @pytest.mark.asyncio
    async def test_delete_reports_subtree(self, unit_env, make_post):
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        post = await make_post(await unit_env.get(PostService))
        top = await create.execute(
            CreateCommentRequest(post_id=post.id, user_id="u2", content="top")
        )
        reply = await create.execute(
            CreateCommentRequest(
                post_id=post.id, user_id="u3", content="reply", parent_id=top.comment_id
            )
        )

        result = await delete.execute(DeleteCommentRequest(comment_id=top.comment_id))

        assert sorted(result.deleted_ids) == sorted([top.comment_id, reply.comment_id])

    @pytest.mark.asyncio
    async def test_empty_content_propagates(self, unit_env, make_post):
        create = await unit_env.get(CreateCommentUseCase)
        post = await make_post(await unit_env.get(PostService))

        with pytest.raises(ValidationError):
            await create.execute(
                CreateCommentRequest(post_id=post.id, user_id="u2", content=" ")
            )
