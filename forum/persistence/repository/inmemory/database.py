"""Shared in-memory tables for the in-memory repositories.

Rows are plain dicts shaped like the SQL tables so the same mappers turn
them into domain models. Foreign keys and ``ON DELETE CASCADE`` are mimicked
so repositories behave like their PostgreSQL counterparts.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import Any, Dict, Iterator, List

from sqlalchemy.exc import IntegrityError

Row = Dict[str, Any]


@dataclass
class InMemoryDatabase:
    """In-memory stand-in for the forum schema (testing only)."""

    posts: Dict[int, Row] = field(default_factory=dict)
    post_likes: List[Row] = field(default_factory=list)
    comments: Dict[int, Row] = field(default_factory=dict)
    comment_likes: List[Row] = field(default_factory=list)
    notifications: Dict[int, Row] = field(default_factory=dict)
    bookmarks: List[Row] = field(default_factory=list)
    _sequences: Dict[str, Iterator[int]] = field(
        default_factory=lambda: defaultdict(lambda: count(1))
    )

    def next_id(self, table: str) -> int:
        """Next serial value for a table."""
        return next(self._sequences[table])

    def now(self) -> datetime:
        """Timestamp for new rows."""
        return datetime.now()

    def require(self, table: str, row_id: int | None) -> None:
        """Raise IntegrityError when a referenced row is missing."""
        if row_id is None:
            return
        rows: Dict[int, Row] = getattr(self, table)
        if row_id not in rows:
            raise IntegrityError(
                f"Foreign key violation: {table}.id={row_id}", None, Exception()
            )

    def post_likers(self, post_id: int) -> list[str]:
        """User ids liking a post, in like order."""
        return [like["user_id"] for like in self.post_likes if like["post_id"] == post_id]

    def comment_likers(self, comment_id: int) -> list[str]:
        """User ids liking a comment, in like order."""
        return [
            like["user_id"]
            for like in self.comment_likes
            if like["comment_id"] == comment_id
        ]

    def descendants(self, root_id: int) -> list[int]:
        """Ids of a comment and everything beneath it (empty if unknown)."""
        if root_id not in self.comments:
            return []
        collected = [root_id]
        frontier = [root_id]
        while frontier:
            children = [
                row["id"]
                for row in self.comments.values()
                if row["parent_id"] in frontier and row["id"] not in collected
            ]
            collected.extend(children)
            frontier = children
        return collected

    def delete_comments(self, comment_ids: list[int]) -> None:
        """Delete comments and cascade to their likes and notifications."""
        doomed = set(comment_ids)
        for comment_id in doomed:
            self.comments.pop(comment_id, None)
        self.comment_likes = [
            like for like in self.comment_likes if like["comment_id"] not in doomed
        ]
        self.notifications = {
            key: row
            for key, row in self.notifications.items()
            if row["comment_id"] not in doomed
        }

    def delete_post(self, post_id: int) -> bool:
        """Delete a post and cascade to everything that references it."""
        if self.posts.pop(post_id, None) is None:
            return False
        self.delete_comments(
            [row["id"] for row in self.comments.values() if row["post_id"] == post_id]
        )
        self.post_likes = [like for like in self.post_likes if like["post_id"] != post_id]
        self.bookmarks = [row for row in self.bookmarks if row["post_id"] != post_id]
        self.notifications = {
            key: row
            for key, row in self.notifications.items()
            if row["post_id"] != post_id
        }
        return True
