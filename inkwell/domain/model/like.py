"""Like entity.

A like is a single user's endorsement of one post. The set of like records
is the source of truth for a post's like count.
"""

from datetime import datetime, timezone

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - At most one like per (post, user) pair (enforced by database unique constraint)
    - Neither the post nor the user holds a reference back to the like
    """

    id: LikeId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
