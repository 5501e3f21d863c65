"""List liked posts use case."""

from pydantic import BaseModel

from inkwell.application.usecase.post import PostResponse
from inkwell.domain.service import LikeService


class ListLikedPostsRequest(BaseModel):
    """List liked posts request."""

    user_id: str


class ListLikedPostsResponse(BaseModel):
    """List liked posts response."""

    posts: list[PostResponse]


class ListLikedPostsUseCase:
    """Use case for listing the posts a user likes."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize list liked posts use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ListLikedPostsRequest) -> ListLikedPostsResponse:
        """Execute list liked posts flow.

        Args:
            request: Request with the user ID

        Returns:
            Liked posts that still exist, most recently liked first
        """
        posts = await self.like_service.liked_posts(request.user_id)
        return ListLikedPostsResponse(
            posts=[PostResponse.from_post(post) for post in posts]
        )
