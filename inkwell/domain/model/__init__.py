"""Domain model entities for Inkwell."""

from inkwell.domain.model.comment import Comment
from inkwell.domain.model.like import Like
from inkwell.domain.model.post import Post, PostPatch

__all__ = [
    "Post",
    "PostPatch",
    "Comment",
    "Like",
]
