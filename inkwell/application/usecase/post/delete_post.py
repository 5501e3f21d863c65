"""Delete post use case."""

from pydantic import BaseModel

from inkwell.domain.error import NotAuthorizedError, NotFoundError
from inkwell.domain.service import AuthorizationService, PostService


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    deleted: bool


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(
        self,
        post_service: PostService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            authorization_service: Authorization domain service
        """
        self.post_service = post_service
        self.authorization_service = authorization_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the post's author
        """
        post = await self.post_service.find_post(request.post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        if not self.authorization_service.can_mutate(post, request.user_id):
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        deleted = await self.post_service.delete_post(post.id)
        return DeletePostResponse(post_id=str(post.id), deleted=deleted)
