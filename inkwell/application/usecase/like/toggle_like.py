"""Toggle like use case."""

from pydantic import BaseModel

from inkwell.domain.service import LikeService
from inkwell.domain.value import LikeOutcome


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    post_id: str
    user_id: str


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    outcome: LikeOutcome
    liked: bool
    likes_count: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a post."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            The toggle outcome; callers check ``outcome`` before trusting
            ``likes_count``
        """
        result = await self.like_service.toggle_like(request.post_id, request.user_id)
        return ToggleLikeResponse(
            outcome=result.outcome,
            liked=result.liked,
            likes_count=result.likes_count,
        )
