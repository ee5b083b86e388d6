"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import PaginationSettings
from forum.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
)
from forum.domain.service import (
    CommentService,
    LikeService,
    NotificationService,
    PostService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
        pagination: PaginationSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            notification_service=notification_service,
            pagination=pagination,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        bookmark_repository: BookmarkRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, bookmark_repository=bookmark_repository
        )
