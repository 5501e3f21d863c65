"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from inkwell.domain.service import PostService
from inkwell.domain.value import Identity, PostStatus


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    excerpt: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    featured_image: str | None = None
    status: PostStatus = PostStatus.DRAFT
    author: Identity | None = None  # None for anonymous posts


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: str


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse | None:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The new post's ID, None if it could not be stored

        Raises:
            ValidationError: If title or content is blank
        """
        with logfire.span(
            "create_post.execute",
            title=request.title,
            status=request.status.value,
            tags=request.tags,
        ):
            post_id = await self.post_service.create_post(
                title=request.title,
                content=request.content,
                author=request.author,
                excerpt=request.excerpt,
                category=request.category,
                tags=request.tags,
                featured_image=request.featured_image,
                status=request.status,
            )
            if post_id is None:
                return None
            return CreatePostResponse(post_id=str(post_id))
