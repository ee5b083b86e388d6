"""Comment entity.

Comments are stored flat. Threading is a ``parent_id`` back-reference to
another comment on the same post; trees are rebuilt on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - parent_id: Direct parent comment (None for top-level)
    - likes: Users who liked the comment, derived from the comment_likes relation
    """

    id: CommentId
    post_id: PostId
    user_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    likes: list[UserId] = Field(default_factory=list)

    @property
    def is_top_level(self) -> bool:
        """Whether this comment anchors a thread directly to the post."""
        return self.parent_id is None
