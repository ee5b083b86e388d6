"""Mappers for converting database rows to domain models.

Since we're using Pydantic domain models (immutable), we map rows by hand
instead of using SQLAlchemy's ORM.
"""

from typing import Any, Dict

from forum.domain.model import Comment, Notification, Post
from forum.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


def _likes(row: Dict[str, Any]) -> list[UserId]:
    """Extract the aggregated like list (absent or NULL means no likes)."""
    return [UserId(user_id) for user_id in row.get("likes") or []]


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict, optionally with an aggregated ``likes`` column

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        user_id=UserId(row["user_id"]),
        tags=list(row.get("tags") or []),
        category=row.get("category"),
        likes=_likes(row),
        created_at=row["created_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict, optionally with an aggregated ``likes`` column

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        content=row["content"],
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
        likes=_likes(row),
    )


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    return Notification(
        id=NotificationId(row["id"]),
        user_id=UserId(row["user_id"]),
        type=NotificationType(row["type"]),
        post_id=PostId(row["post_id"]),
        comment_id=CommentId(row["comment_id"]),
        created_at=row["created_at"],
    )
