"""Create comment use case."""

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId, UserId

from .items import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    user_id: str  # Pre-authenticated caller
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The comment service validates the post and parent, stores the comment
        and notifies the post or parent author.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If content is empty or post/parent is invalid
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            user_id=UserId(request.user_id),
            content=request.content,
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
        )
        return CreateCommentResponse(**CommentItem.from_domain(comment).model_dump())
