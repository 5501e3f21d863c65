"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import (
    ANONYMOUS_AUTHOR,
    AuthorRef,
    CommentId,
    LikeId,
    PostId,
    UserId,
)
from inkwell.domain.value.identity import (
    identities_equal,
    normalize_author_ref,
    parse_id,
)
from inkwell.domain.value.types import (
    Identity,
    LikeOutcome,
    LikeToggleResult,
    PostStatus,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "AuthorRef",
    "ANONYMOUS_AUTHOR",
    # Identity comparison
    "parse_id",
    "identities_equal",
    "normalize_author_ref",
    # Types
    "Identity",
    "LikeOutcome",
    "LikeToggleResult",
    "PostStatus",
]
