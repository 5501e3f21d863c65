"""Post aggregate root.

Posts are the primary content type in Inkwell: a titled piece of writing
with one author, either kept as a draft or published.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import AuthorRef, PostId, PostStatus


class Post(DomainModel):
    """Post aggregate root.

    The author name and email are a snapshot taken when the post was
    created; they are not kept in sync with the author's profile.

    ``likes`` is a cached count of the post's like records and ``views``
    only ever grows.
    """

    id: PostId
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    excerpt: str = ""
    author_id: AuthorRef
    author_name: str
    author_email: str
    category: str = "General"
    tags: list[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = None
    read_time: int = Field(default=1, ge=1)
    likes: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED


class PostPatch(DomainModel):
    """Partial update to a post.

    Only fields that were explicitly set are applied. Author fields and the
    likes/views counters cannot be patched.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    featured_image: Optional[str] = None
    status: Optional[PostStatus] = None
