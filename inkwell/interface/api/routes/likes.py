"""Like routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from inkwell.application.usecase.like import (
    CheckLikeRequest,
    CheckLikeResponse,
    CheckLikeUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from inkwell.domain.value import LikeOutcome
from inkwell.interface.api.identity import identity_headers, require_user

router = APIRouter(prefix="/posts", tags=["likes"], route_class=DishkaRoute)


class ToggleLikeAPIResponse(BaseModel):
    """API response for a like toggle."""

    liked: bool
    likes_count: int


@router.post("/{post_id}/like", response_model=ToggleLikeAPIResponse)
async def toggle_like(
    post_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> ToggleLikeAPIResponse:
    """Like a post, or unlike it if already liked.

    Requires authentication.

    Args:
        post_id: Post UUID
        toggle_like_use_case: Toggle like use case from DI
        get_current_user_use_case: Get current user use case from DI
        headers: Identity headers

    Returns:
        Whether the user now likes the post, and the post's like count

    Raises:
        HTTPException: If not authenticated, post not found, or the toggle failed
    """
    user = await require_user(get_current_user_use_case, headers, "like posts")

    result = await toggle_like_use_case.execute(
        ToggleLikeRequest(post_id=post_id, user_id=user.user_id)
    )

    if result.outcome == LikeOutcome.POST_NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    if result.outcome == LikeOutcome.FAILED:
        logfire.error("Like toggle failed", post_id=post_id, user_id=user.user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle like",
        )

    return ToggleLikeAPIResponse(liked=result.liked, likes_count=result.likes_count)


@router.get("/{post_id}/like", response_model=CheckLikeResponse)
async def check_like(
    post_id: str,
    check_like_use_case: FromDishka[CheckLikeUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> CheckLikeResponse:
    """Check whether the current user likes a post (False when anonymous)."""
    user = await get_current_user_use_case.execute(headers)
    return await check_like_use_case.execute(
        CheckLikeRequest(post_id=post_id, user_id=user.user_id if user else None)
    )
