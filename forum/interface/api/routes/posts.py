"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from forum.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(max_length=255)
    content: str
    user_id: str
    tags: list[str] = Field(default_factory=list)
    category: str | None = Field(default=None, max_length=50)


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI

    Returns:
        Created post details

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except ValidationError as e:
        logfire.warn("Post creation rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    tag: str | None = None,
    category: str | None = None,
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        tag: Only posts carrying this tag
        category: Only posts in this category

    Returns:
        Matching posts
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(tag=tag, category=category)
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post by ID.

    Raises:
        HTTPException: If the post doesn't exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> None:
    """Delete a post along with its comments, likes, bookmarks and notifications."""
    await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))
