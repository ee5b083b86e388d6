"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    GetFullCommentThreadRequest,
    GetFullCommentThreadUseCase,
)
from forum.domain.error import ValidationError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: int
    user_id: str
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Content must hold at least one non-whitespace character; empty or
    whitespace-only content is rejected with 400.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment details

    Raises:
        HTTPException: If content is empty or the post/parent is invalid
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(**request.model_dump())
        )
    except ValidationError as e:
        logfire.warn("Comment creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/posts/{post_id}/comments", response_model=GetCommentThreadResponse)
async def get_comment_thread(
    post_id: int,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
    limit: str | None = None,
    offset: str | None = None,
) -> GetCommentThreadResponse:
    """Get a page of top-level comments with their direct replies.

    Bad ``limit``/``offset`` values fall back to defaults instead of failing.

    Args:
        post_id: Post ID
        get_comment_thread_use_case: Get comment thread use case from DI
        limit: Page size (default 20, capped only when PAGINATION__MAX_LIMIT is set)
        offset: Top-level comments to skip

    Returns:
        Comment page and the window actually applied
    """
    return await get_comment_thread_use_case.execute(
        GetCommentThreadRequest(post_id=post_id, limit=limit, offset=offset)
    )


@router.get("/posts/{post_id}/comments/all", response_class=Response)
async def get_full_comment_thread(
    post_id: int,
    get_full_comment_thread_use_case: FromDishka[GetFullCommentThreadUseCase],
) -> Response:
    """Get every comment on a post, nested at any depth.

    The JSON body comes from the use case response, not FastAPI encoding.
    """
    thread = await get_full_comment_thread_use_case.execute(
        GetFullCommentThreadRequest(post_id=post_id)
    )
    return Response(content=thread.render_json(), media_type="application/json")


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete a comment and all replies beneath it.

    Deleting a comment that doesn't exist still succeeds.
    """
    await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=comment_id))
