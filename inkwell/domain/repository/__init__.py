"""Repository interfaces for Inkwell domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.repository.like import LikeRepository
from inkwell.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
]
