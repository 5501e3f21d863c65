"""Update post use case."""

import logfire
from pydantic import BaseModel

from inkwell.domain.error import NotAuthorizedError, NotFoundError
from inkwell.domain.model import PostPatch
from inkwell.domain.service import AuthorizationService, PostService
from inkwell.domain.value import PostStatus


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only fields that were set are applied.
    """

    post_id: str
    user_id: str  # Current user ID (must be author)
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    featured_image: str | None = None
    status: PostStatus | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post_id: str
    updated: bool  # False when the patch changed nothing


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self,
        post_service: PostService,
        authorization_service: AuthorizationService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            authorization_service: Authorization domain service
        """
        self.post_service = post_service
        self.authorization_service = authorization_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with post ID, user ID and changes

        Returns:
            Whether the post changed

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user isn't the post's author
            ValidationError: If the patch blanks the title or content
        """
        # 1. Retrieve existing post (doesn't count as a view)
        post = await self.post_service.find_post(request.post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        # 2. Check authorization (user owns post)
        if not self.authorization_service.can_mutate(post, request.user_id):
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        # 3. Update via service
        fields = request.model_dump(
            exclude_unset=True, exclude={"post_id", "user_id"}
        )
        updated = await self.post_service.update_post(post.id, PostPatch(**fields))

        logfire.info("Post update handled", post_id=str(post.id), updated=updated)
        return UpdatePostResponse(post_id=str(post.id), updated=updated)
