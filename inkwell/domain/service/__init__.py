"""Domain services."""

from .authorization_service import AuthorizationService
from .comment_service import CommentService
from .like_service import LikeService
from .post_service import PostService

__all__ = [
    "AuthorizationService",
    "CommentService",
    "LikeService",
    "PostService",
]
