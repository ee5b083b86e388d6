"""Comment tree reconstruction.

Comments are stored flat with a ``parent_id`` back-reference. These helpers
rebuild the hierarchy in memory from an id -> node index, without touching
the store. Both builders are pure and never fail on broken relationships:
a reply whose parent is not in the input is left out of the result.
"""

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId


@dataclass
class CommentNode:
    """A comment together with its direct replies."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


def build_one_level(
    top_level: Sequence[Comment], replies: Sequence[Comment]
) -> list[CommentNode]:
    """Attach replies to their top-level parents, one level deep.

    Replies whose parent is not among ``top_level`` are dropped: they hang
    off a comment on another page or deeper in the thread. Reply nodes never
    carry replies of their own.

    Args:
        top_level: Top-level comments, in display order
        replies: Candidate replies, in display order

    Returns:
        One node per top-level comment, in input order, each holding its
        replies in input order
    """
    roots = [CommentNode(comment=comment) for comment in top_level]
    # Last occurrence wins if an id shows up twice
    index: dict[CommentId, CommentNode] = {node.comment.id: node for node in roots}

    for reply in replies:
        if reply.parent_id is None:
            continue
        parent = index.get(reply.parent_id)
        if parent is not None:
            parent.replies.append(CommentNode(comment=reply))

    return roots


def build_unlimited(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the full reply forest for a post.

    Every comment becomes a node. Top-level comments become roots; every
    other comment is appended to its parent's replies. Orphans (parent not
    in ``comments``) are dropped along with anything beneath them.

    Args:
        comments: All comments of a post, in display order

    Returns:
        Forest roots in input order
    """
    nodes = [CommentNode(comment=comment) for comment in comments]
    # Last occurrence wins if an id shows up twice
    index: dict[CommentId, CommentNode] = {node.comment.id: node for node in nodes}

    roots: list[CommentNode] = []
    for node in nodes:
        parent_id = node.comment.parent_id
        if parent_id is None:
            roots.append(node)
            continue

        parent = index.get(parent_id)
        # A comment listed as its own parent is an orphan too
        if parent is not None and parent is not node:
            parent.replies.append(node)

    return roots


def walk(nodes: Sequence[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Visit a forest depth-first, parents before their replies.

    Yields every node with its depth (0 for roots) without recursing, so
    reply chains of any length can be walked.
    """
    stack = [(node, 0) for node in reversed(nodes)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))


def count_nodes(nodes: Sequence[CommentNode]) -> int:
    """Count every node in a forest."""
    return sum(1 for _ in walk(nodes))
