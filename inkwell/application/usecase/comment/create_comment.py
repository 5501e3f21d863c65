"""Create comment use case."""

from pydantic import BaseModel, Field

from inkwell.domain.error import NotFoundError
from inkwell.domain.service import CommentService, PostService
from inkwell.domain.value import Identity

MAX_COMMENT_LENGTH = 500


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str = Field(max_length=MAX_COMMENT_LENGTH)
    author: Identity  # Authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse | None:
        """Execute create comment flow.

        Steps:
        1. Verify post exists via post service (without counting a view)
        2. Create comment via comment service

        Args:
            request: Create comment request

        Returns:
            The new comment's ID, None if it could not be stored

        Raises:
            NotFoundError: If post not found
            ValidationError: If the content is blank
        """
        post = await self.post_service.find_post(request.post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        comment_id = await self.comment_service.create_comment(
            post_id=post.id,
            author=request.author,
            content=request.content,
        )
        if comment_id is None:
            return None

        return CreateCommentResponse(comment_id=str(comment_id), post_id=str(post.id))
