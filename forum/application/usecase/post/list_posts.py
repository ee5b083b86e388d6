"""List posts use case."""

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import UserId

from .items import PostItem


class ListPostsRequest(BaseModel):
    """List posts request."""

    user_id: str | None = None  # Filter by author
    tag: str | None = None  # Filter by tag
    category: str | None = None  # Filter by category


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int


class ListPostsUseCase:
    """Use case for listing posts, newest first, with optional filters."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filters (all optional, combined with AND)

        Returns:
            Matching posts, newest first
        """
        posts = await self.post_service.list_posts(
            user_id=UserId(request.user_id) if request.user_id else None,
            tag=request.tag,
            category=request.category,
        )
        return ListPostsResponse(
            posts=[PostItem.from_domain(post) for post in posts],
            total=len(posts),
        )
