"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_thread import (
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)
from .get_full_comment_thread import (
    GetFullCommentThreadRequest,
    GetFullCommentThreadResponse,
    GetFullCommentThreadUseCase,
)
from .items import CommentItem, CommentNodeItem, CommentThreadEntry

__all__ = [
    "CommentItem",
    "CommentNodeItem",
    "CommentThreadEntry",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentThreadRequest",
    "GetCommentThreadResponse",
    "GetCommentThreadUseCase",
    "GetFullCommentThreadRequest",
    "GetFullCommentThreadResponse",
    "GetFullCommentThreadUseCase",
]
