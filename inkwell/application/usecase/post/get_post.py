"""Get post use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from inkwell.domain.model import Post
from inkwell.domain.service import LikeService, PostService
from inkwell.domain.value import PostStatus


class PostResponse(BaseModel):
    """Post as returned to clients."""

    post_id: str
    title: str
    content: str
    excerpt: str
    author_id: str
    author_name: str
    author_email: str
    category: str
    tags: list[str]
    featured_image: str | None
    status: PostStatus
    published_at: datetime | None
    read_time: int
    likes: int
    views: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        """Build a response from a domain post."""
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            excerpt=post.excerpt,
            author_id=str(post.author_id),
            author_name=post.author_name,
            author_email=post.author_email,
            category=post.category,
            tags=list(post.tags),
            featured_image=post.featured_image,
            status=post.status,
            published_at=post.published_at,
            read_time=post.read_time,
            likes=post.likes,
            views=post.views,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostResponse(PostResponse):
    """Get post response."""

    has_liked: bool


class GetPostUseCase:
    """Use case for reading a post, counting the read as a view."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: GetPostRequest) -> Optional[GetPostResponse]:
        """Execute get post flow.

        Args:
            request: Get post request with post ID and optional user ID

        Returns:
            Post details if found, None otherwise
        """
        post = await self.post_service.get_post(request.post_id)
        if not post:
            return None

        has_liked = False
        if request.user_id:
            has_liked = await self.like_service.has_liked(post.id, request.user_id)

        return GetPostResponse(
            **PostResponse.from_post(post).model_dump(), has_liked=has_liked
        )
