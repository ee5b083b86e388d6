"""Get full comment thread use case."""

from pydantic import BaseModel

from forum.domain.service import CommentService, walk
from forum.domain.value import PostId

from .items import CommentThreadEntry


class GetFullCommentThreadRequest(BaseModel):
    """Get full comment thread request."""

    post_id: int


class GetFullCommentThreadResponse(BaseModel):
    """Every comment on a post at any depth.

    ``comments`` lists the whole tree depth-first, each entry tagged with its
    depth, so it stays flat however deep the replies go. ``render_json``
    turns it back into the nested shape served over HTTP.
    """

    post_id: int
    comments: list[CommentThreadEntry]
    total: int

    def render_json(self) -> str:
        """Serialize as nested JSON, every comment carrying a ``replies`` list.

        Built with an explicit count of open nodes instead of recursion.
        """
        parts = [f'{{"post_id":{self.post_id},"comments":[']
        open_nodes = 0
        needs_comma = False

        for entry in self.comments:
            while open_nodes > entry.depth:
                parts.append("]}")
                open_nodes -= 1
                needs_comma = True
            if needs_comma:
                parts.append(",")
            fields = entry.model_dump_json(exclude={"depth"})
            parts.append(fields[:-1])
            parts.append(',"replies":[')
            open_nodes += 1
            needs_comma = False

        parts.append("]}" * open_nodes)
        parts.append(f'],"total":{self.total}}}')
        return "".join(parts)


class GetFullCommentThreadUseCase:
    """Use case for reading a post's whole comment tree."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get full comment thread use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: GetFullCommentThreadRequest
    ) -> GetFullCommentThreadResponse:
        """Execute get full comment thread flow.

        Args:
            request: Get full comment thread request

        Returns:
            Depth-first thread entries and the number of comments
        """
        nodes = await self.comment_service.get_full_thread(PostId(request.post_id))
        entries = [
            CommentThreadEntry.from_node(node, depth) for node, depth in walk(nodes)
        ]
        return GetFullCommentThreadResponse(
            post_id=request.post_id,
            comments=entries,
            total=len(entries),
        )
