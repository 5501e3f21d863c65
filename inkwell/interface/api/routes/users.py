"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from inkwell.application.usecase.like import (
    ListLikedPostsRequest,
    ListLikedPostsResponse,
    ListLikedPostsUseCase,
)
from inkwell.interface.api.identity import identity_headers, require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me/liked-posts", response_model=ListLikedPostsResponse)
async def list_liked_posts(
    list_liked_posts_use_case: FromDishka[ListLikedPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> ListLikedPostsResponse:
    """List the posts the current user likes, most recently liked first.

    Requires authentication. Posts deleted since they were liked are left out.
    """
    user = await require_user(
        get_current_user_use_case, headers, "list liked posts"
    )
    return await list_liked_posts_use_case.execute(
        ListLikedPostsRequest(user_id=user.user_id)
    )
