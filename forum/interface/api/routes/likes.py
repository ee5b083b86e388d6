"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from forum.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.value import LikeableType

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


class ToggleLikeAPIRequest(BaseModel):
    """API request for toggling a like."""

    user_id: str


async def _toggle(
    use_case: ToggleLikeUseCase,
    likeable_type: LikeableType,
    likeable_id: int,
    user_id: str,
) -> ToggleLikeResponse:
    try:
        return await use_case.execute(
            ToggleLikeRequest(
                likeable_type=likeable_type,
                likeable_id=likeable_id,
                user_id=user_id,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/posts/{post_id}/like", response_model=ToggleLikeResponse)
async def toggle_post_like(
    post_id: int,
    request: ToggleLikeAPIRequest,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
) -> ToggleLikeResponse:
    """Like a post, or remove the like if the user already likes it.

    Returns the updated post under ``post``.

    Raises:
        HTTPException: If the post doesn't exist
    """
    return await _toggle(
        toggle_like_use_case, LikeableType.POST, post_id, request.user_id
    )


@router.put("/comments/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_comment_like(
    comment_id: int,
    request: ToggleLikeAPIRequest,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
) -> ToggleLikeResponse:
    """Like a comment, or remove the like if the user already likes it.

    Returns the updated comment under ``comment``.

    Raises:
        HTTPException: If the comment doesn't exist
    """
    return await _toggle(
        toggle_like_use_case, LikeableType.COMMENT, comment_id, request.user_id
    )
