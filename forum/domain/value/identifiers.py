"""Strongly typed identifiers for forum domain entities.

Posts, comments and notifications are keyed by store-generated
serial integers. Users are opaque strings handed to us by the identity layer.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
NotificationId = NewType("NotificationId", int)
