"""Toggle like use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.comment.items import CommentItem
from forum.application.usecase.post.items import PostItem
from forum.domain.model import Comment, Post
from forum.domain.service import LikeService
from forum.domain.value import CommentId, LikeableType, PostId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    likeable_type: LikeableType
    likeable_id: int
    user_id: str  # Pre-authenticated caller


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    likeable_type: LikeableType
    likeable_id: int
    liked: bool  # Whether the caller likes the entity after the toggle
    likes: list[str]
    post: PostItem | None = None  # Updated post, for post likes
    comment: CommentItem | None = None  # Updated comment, for comment likes


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            The updated post or comment with its current likes

        Raises:
            NotFoundError: If the post or comment doesn't exist
        """
        user_id = UserId(request.user_id)
        entity: Post | Comment

        if request.likeable_type == LikeableType.POST:
            entity = await self.like_service.toggle_post_like(
                PostId(request.likeable_id), user_id
            )
        else:  # LikeableType.COMMENT
            entity = await self.like_service.toggle_comment_like(
                CommentId(request.likeable_id), user_id
            )

        return ToggleLikeResponse(
            likeable_type=request.likeable_type,
            likeable_id=request.likeable_id,
            liked=user_id in entity.likes,
            likes=list(entity.likes),
            post=PostItem.from_domain(entity) if isinstance(entity, Post) else None,
            comment=(
                CommentItem.from_domain(entity) if isinstance(entity, Comment) else None
            ),
        )
