"""Strongly typed identifiers for Inkwell domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)

# Author reference stored on a post: a UserId when the creator supplied a
# valid id, otherwise the raw string (e.g. "anonymous")
AuthorRef = UserId | str

ANONYMOUS_AUTHOR = "anonymous"
