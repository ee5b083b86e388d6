"""Bookmark routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from forum.application.usecase.bookmark import (
    ToggleBookmarkRequest,
    ToggleBookmarkResponse,
    ToggleBookmarkUseCase,
)
from forum.domain.error import NotFoundError

router = APIRouter(tags=["bookmarks"], route_class=DishkaRoute)


class ToggleBookmarkAPIRequest(BaseModel):
    """API request for toggling a bookmark."""

    user_id: str


@router.put("/posts/{post_id}/bookmark", response_model=ToggleBookmarkResponse)
async def toggle_bookmark(
    post_id: int,
    request: ToggleBookmarkAPIRequest,
    toggle_bookmark_use_case: FromDishka[ToggleBookmarkUseCase],
) -> ToggleBookmarkResponse:
    """Bookmark a post, or remove the bookmark if it already exists.

    Raises:
        HTTPException: If the post doesn't exist
    """
    try:
        return await toggle_bookmark_use_case.execute(
            ToggleBookmarkRequest(post_id=post_id, user_id=request.user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
