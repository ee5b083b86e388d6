"""Get paginated comment thread use case."""

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import PostId

from .items import CommentNodeItem


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request.

    Limit and offset are kept raw; the comment service coerces them.
    """

    post_id: int
    limit: str | int | None = None
    offset: str | int | None = None


class GetCommentThreadResponse(BaseModel):
    """One page of top-level comments with their direct replies."""

    post_id: int
    comments: list[CommentNodeItem]
    limit: int
    offset: int


class GetCommentThreadUseCase:
    """Use case for reading a page of a post's comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentThreadRequest) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Args:
            request: Post ID plus raw pagination input

        Returns:
            Top-level comments with one level of replies and the applied window
        """
        page = self.comment_service.coerce_page(request.limit, request.offset)
        nodes = await self.comment_service.get_paginated_thread(
            PostId(request.post_id), limit=page.limit, offset=page.offset
        )
        return GetCommentThreadResponse(
            post_id=request.post_id,
            comments=[CommentNodeItem.from_node(node) for node in nodes],
            limit=page.limit,
            offset=page.offset,
        )
