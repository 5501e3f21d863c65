"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from inkwell.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from inkwell.application.usecase.comment.create_comment import MAX_COMMENT_LENGTH
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.interface.api.identity import identity_headers, require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get a post's comments, oldest first.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Comments for the post
    """
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> CreateCommentResponse:
    """Comment on a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        get_current_user_use_case: Get current user use case from DI
        headers: Identity headers

    Returns:
        The new comment's ID

    Raises:
        HTTPException: If not authenticated, post not found or content blank
    """
    user = await require_user(get_current_user_use_case, headers, "comment")

    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                content=request.content,
                author=user.to_identity(),
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except ValidationError as e:
        logfire.warn("Comment validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )
    return result


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> DeleteCommentResponse:
    """Delete one of your own comments.

    Someone else's comment is reported as not found.

    Raises:
        HTTPException: If not authenticated or no such comment of yours exists
    """
    user = await require_user(get_current_user_use_case, headers, "delete comments")

    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user.user_id)
    )
    if not result.deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    return result
