"""Create post use case."""

from pydantic import BaseModel, Field

from forum.domain.service import PostService
from forum.domain.value import UserId

from .items import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    user_id: str  # Pre-authenticated caller
    tags: list[str] = Field(default_factory=list)
    category: str | None = None


class CreatePostResponse(PostItem):
    """Create post response."""


class CreatePostUseCase:
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If title or content is empty
        """
        post = await self.post_service.create_post(
            title=request.title,
            content=request.content,
            user_id=UserId(request.user_id),
            tags=request.tags,
            category=request.category,
        )
        return CreatePostResponse(**PostItem.from_domain(post).model_dump())
