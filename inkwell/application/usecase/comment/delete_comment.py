"""Delete comment use case."""

from pydantic import BaseModel

from inkwell.domain.service import CommentService


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Delete the comment if the requesting user wrote it."""
        deleted = await self.comment_service.delete_comment(
            request.comment_id, request.user_id
        )
        return DeleteCommentResponse(comment_id=request.comment_id, deleted=deleted)
