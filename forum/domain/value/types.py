"""Enumerated domain values."""

from enum import Enum


class NotificationType(str, Enum):
    """Why a user is being notified."""

    COMMENT = "comment"  # Someone commented on your post
    REPLY = "reply"  # Someone replied to your comment


class LikeableType(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"
