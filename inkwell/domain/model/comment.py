"""Comment entity.

Comments are flat discussions attached to a post, displayed oldest first.
"""

from datetime import datetime, timezone

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    The post reference is not checked against existing posts here; callers
    are responsible for commenting on posts that exist. Author name and
    email are a snapshot taken at creation.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    author_name: str
    author_email: str
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
