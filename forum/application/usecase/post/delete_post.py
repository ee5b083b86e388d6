"""Delete post use case."""

from pydantic import BaseModel

from forum.domain.service import PostService
from forum.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int


class DeletePostResponse(BaseModel):
    """Delete post response."""

    deleted: bool


class DeletePostUseCase:
    """Use case for deleting a post with its comments, likes and bookmarks."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow. Unknown posts delete nothing."""
        deleted = await self.post_service.delete_post(PostId(request.post_id))
        return DeletePostResponse(deleted=deleted)
