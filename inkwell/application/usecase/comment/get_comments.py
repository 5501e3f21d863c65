"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.service import CommentService


class CommentResponse(BaseModel):
    """Comment as returned to clients."""

    comment_id: str
    post_id: str
    author_id: str
    author_name: str
    content: str
    created_at: datetime
    updated_at: datetime


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentResponse]


class GetCommentsUseCase:
    """Use case for listing a post's comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Request with the post ID

        Returns:
            Comments, oldest first
        """
        comments = await self.comment_service.list_comments(request.post_id)
        return GetCommentsResponse(
            comments=[
                CommentResponse(
                    comment_id=str(comment.id),
                    post_id=str(comment.post_id),
                    author_id=str(comment.author_id),
                    author_name=comment.author_name,
                    content=comment.content,
                    created_at=comment.created_at,
                    updated_at=comment.updated_at,
                )
                for comment in comments
            ]
        )
