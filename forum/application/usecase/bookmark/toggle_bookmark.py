"""Toggle bookmark use case."""

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import PostId, UserId


class ToggleBookmarkRequest(BaseModel):
    """Toggle bookmark request."""

    post_id: int
    user_id: str  # Pre-authenticated caller


class ToggleBookmarkResponse(BaseModel):
    """Toggle bookmark response."""

    post_id: int
    bookmarked: bool


class ToggleBookmarkUseCase:
    """Use case for bookmarking or unbookmarking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize toggle bookmark use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ToggleBookmarkRequest) -> ToggleBookmarkResponse:
        """Execute toggle bookmark flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        bookmarked = await self.post_service.toggle_bookmark(
            PostId(request.post_id), UserId(request.user_id)
        )
        return ToggleBookmarkResponse(post_id=request.post_id, bookmarked=bookmarked)
