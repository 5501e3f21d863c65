"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from inkwell.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from inkwell.domain.value import PostStatus
from inkwell.interface.api.identity import identity_headers, require_user

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=100)
    tags: list[str] = Field(default_factory=list)
    featured_image: str | None = None
    status: PostStatus = PostStatus.DRAFT


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Omitted fields are left alone.
    """

    title: str | None = Field(default=None, max_length=300)
    content: str | None = None
    excerpt: str | None = Field(default=None, max_length=500)
    category: str | None = Field(default=None, max_length=100)
    tags: list[str] | None = None
    featured_image: str | None = None
    status: PostStatus | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
    skip: int = Query(default=0, ge=0),
    q: str | None = None,
    author: str | None = None,
) -> ListPostsResponse:
    """List published posts, search them, or list one author's posts.

    Args:
        list_posts_use_case: List posts use case from DI
        limit: Maximum number of posts to return (1-100)
        skip: Number of posts to skip
        q: Search text (title, content or tag)
        author: Author ID (lists drafts too)

    Returns:
        List of posts
    """
    request = ListPostsRequest(query=q, author_id=author, limit=limit, skip=skip)
    try:
        return await list_posts_use_case.execute(request)
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> CreatePostResponse:
    """Create a new post.

    Without identity headers the post is stored as anonymous.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI
        headers: Identity headers (optional)

    Returns:
        The new post's ID

    Raises:
        HTTPException: If validation fails or the post cannot be stored
    """
    user = await get_current_user_use_case.execute(headers)

    try:
        result = await create_post_use_case.execute(
            CreatePostRequest(
                **request.model_dump(),
                author=user.to_identity() if user else None,
            )
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )
    return result


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> GetPostResponse:
    """Get a post by ID. Each successful read counts as a view.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI
        get_current_user_use_case: Get current user use case from DI
        headers: Identity headers (optional)

    Returns:
        Post details

    Raises:
        HTTPException: If post not found
    """
    user = await get_current_user_use_case.execute(headers)

    post = await get_post_use_case.execute(
        GetPostRequest(post_id=post_id, user_id=user.user_id if user else None)
    )
    if not post:
        logfire.warn("Post not found", post_id=post_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> UpdatePostResponse:
    """Update a post. Only the post author can edit.

    Args:
        post_id: Post UUID
        request: Fields to change
        update_post_use_case: Update post use case from DI
        get_current_user_use_case: Get current user use case from DI
        headers: Identity headers

    Returns:
        Whether the post changed

    Raises:
        HTTPException: If not authenticated, not authorized, not found or invalid
    """
    user = await require_user(get_current_user_use_case, headers, "edit posts")

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user.user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this post",
        )
    except ValidationError as e:
        logfire.warn("Post update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    headers: GetCurrentUserRequest = Depends(identity_headers),
) -> DeletePostResponse:
    """Delete a post. Only the post author can delete.

    Raises:
        HTTPException: If not authenticated, not authorized or not found
    """
    user = await require_user(get_current_user_use_case, headers, "delete posts")

    try:
        result = await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user.user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this post",
        )

    if not result.deleted:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )
    return result
