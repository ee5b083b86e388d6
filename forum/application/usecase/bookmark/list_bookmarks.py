"""List bookmarked posts use case."""

from pydantic import BaseModel

from forum.application.usecase.post.items import PostItem
from forum.domain.service import PostService
from forum.domain.value import UserId


class ListBookmarksRequest(BaseModel):
    """List bookmarks request."""

    user_id: str


class ListBookmarksResponse(BaseModel):
    """List bookmarks response."""

    posts: list[PostItem]
    total: int


class ListBookmarksUseCase:
    """Use case for listing a user's bookmarked posts, latest bookmark first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list bookmarks use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListBookmarksRequest) -> ListBookmarksResponse:
        posts = await self.post_service.list_bookmarked_posts(UserId(request.user_id))
        return ListBookmarksResponse(
            posts=[PostItem.from_domain(post) for post in posts],
            total=len(posts),
        )
