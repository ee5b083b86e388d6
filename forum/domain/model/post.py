"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Likes are derived from the post_likes relation, one entry per user.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    user_id: UserId
    tags: list[str] = Field(default_factory=list)
    category: Optional[str] = Field(default=None, max_length=50)
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
