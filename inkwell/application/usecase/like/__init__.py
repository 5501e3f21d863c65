"""Like use cases."""

from .check_like import CheckLikeRequest, CheckLikeResponse, CheckLikeUseCase
from .list_liked_posts import (
    ListLikedPostsRequest,
    ListLikedPostsResponse,
    ListLikedPostsUseCase,
)
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "CheckLikeRequest",
    "CheckLikeResponse",
    "CheckLikeUseCase",
    "ListLikedPostsRequest",
    "ListLikedPostsResponse",
    "ListLikedPostsUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
