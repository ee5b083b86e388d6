"""Post response items shared by the post and bookmark use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Post


class PostItem(BaseModel):
    """Post item in response."""

    post_id: int
    title: str
    content: str
    user_id: str
    tags: list[str]
    category: str | None
    likes: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            post_id=post.id,
            title=post.title,
            content=post.content,
            user_id=post.user_id,
            tags=list(post.tags),
            category=post.category,
            likes=list(post.likes),
            created_at=post.created_at,
        )
