"""Check like use case."""

from pydantic import BaseModel

from inkwell.domain.service import LikeService


class CheckLikeRequest(BaseModel):
    """Check like request."""

    post_id: str
    user_id: str | None = None


class CheckLikeResponse(BaseModel):
    """Check like response."""

    liked: bool


class CheckLikeUseCase:
    """Use case for checking whether the current user likes a post."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: CheckLikeRequest) -> CheckLikeResponse:
        """Anonymous callers never like anything."""
        if not request.user_id:
            return CheckLikeResponse(liked=False)
        liked = await self.like_service.has_liked(request.post_id, request.user_id)
        return CheckLikeResponse(liked=liked)
