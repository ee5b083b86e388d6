"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryBookmarkRepository,
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryLikeRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database is APP-scoped so state survives across requests of one
    container (needed by the API tests). Every test builds its own container,
    so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, db: InMemoryDatabase) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, db: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, db: InMemoryDatabase) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, db: InMemoryDatabase
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(db)

    @provide(scope=Scope.REQUEST)
    def get_bookmark_repository(self, db: InMemoryDatabase) -> BookmarkRepository:
        """Provide in-memory bookmark repository."""
        return InMemoryBookmarkRepository(db)
