"""Per-user read routes: authored posts, bookmarks and notifications."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.bookmark import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
)
from forum.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from forum.application.usecase.post import (
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/posts", response_model=ListPostsResponse)
async def list_user_posts(
    user_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """List posts written by a user, newest first."""
    return await list_posts_use_case.execute(ListPostsRequest(user_id=user_id))


@router.get("/{user_id}/bookmarks", response_model=ListBookmarksResponse)
async def list_bookmarks(
    user_id: str,
    list_bookmarks_use_case: FromDishka[ListBookmarksUseCase],
) -> ListBookmarksResponse:
    """List posts a user bookmarked, most recent bookmark first."""
    return await list_bookmarks_use_case.execute(ListBookmarksRequest(user_id=user_id))


@router.get("/{user_id}/notifications", response_model=ListNotificationsResponse)
async def list_notifications(
    user_id: str,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
) -> ListNotificationsResponse:
    """List a user's notifications, newest first."""
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id)
    )
