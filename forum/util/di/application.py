"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.bookmark import (
    ListBookmarksUseCase,
    ToggleBookmarkUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentThreadUseCase,
    GetFullCommentThreadUseCase,
)
from forum.application.usecase.like import ToggleLikeUseCase
from forum.application.usecase.notification import ListNotificationsUseCase
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from forum.domain.service import (
    CommentService,
    LikeService,
    NotificationService,
    PostService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comment_thread_use_case(
        self, comment_service: CommentService
    ) -> GetCommentThreadUseCase:
        """Provide paginated comment thread use case."""
        return GetCommentThreadUseCase(comment_service=comment_service)

    @provide
    def get_get_full_comment_thread_use_case(
        self, comment_service: CommentService
    ) -> GetFullCommentThreadUseCase:
        """Provide full comment thread use case."""
        return GetFullCommentThreadUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    # Bookmark use cases
    @provide
    def get_toggle_bookmark_use_case(
        self, post_service: PostService
    ) -> ToggleBookmarkUseCase:
        """Provide toggle bookmark use case."""
        return ToggleBookmarkUseCase(post_service=post_service)

    @provide
    def get_list_bookmarks_use_case(
        self, post_service: PostService
    ) -> ListBookmarksUseCase:
        """Provide list bookmarks use case."""
        return ListBookmarksUseCase(post_service=post_service)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)
