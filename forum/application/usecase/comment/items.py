"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model import Comment
from forum.domain.service import CommentNode


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    post_id: int
    user_id: str
    content: str
    parent_id: int | None
    likes: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            content=comment.content,
            parent_id=comment.parent_id,
            likes=list(comment.likes),
            created_at=comment.created_at,
        )


class CommentNodeItem(CommentItem):
    """Comment with its nested replies."""

    replies: list["CommentNodeItem"] = []

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeItem":
        base = CommentItem.from_domain(node.comment)
        return cls(
            **base.model_dump(),
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class CommentThreadEntry(CommentItem):
    """Comment in a flattened thread, parents before their replies."""

    depth: int  # 0 for top-level comments

    @classmethod
    def from_node(cls, node: CommentNode, depth: int) -> "CommentThreadEntry":
        return cls(**CommentItem.from_domain(node.comment).model_dump(), depth=depth)
