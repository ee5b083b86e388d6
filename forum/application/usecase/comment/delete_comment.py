"""Delete comment use case."""

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted_ids: list[int]


class DeleteCommentUseCase:
    """Use case for deleting a comment and every reply beneath it."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow. Unknown comments delete nothing."""
        deleted = await self.comment_service.delete_comment(
            CommentId(request.comment_id)
        )
        return DeleteCommentResponse(deleted_ids=list(deleted))
