"""In-memory post repository for testing."""

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from inkwell.domain.model.post import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import AuthorRef, PostId

_NEVER = datetime.min.replace(tzinfo=timezone.utc)


def _newest_first(posts: list[Post]) -> list[Post]:
    """Order by published_at desc (unpublished last), then created_at desc."""
    posts.sort(key=lambda p: p.created_at, reverse=True)
    posts.sort(key=lambda p: p.published_at or _NEVER, reverse=True)
    return posts


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find several posts by ID."""
        return [self._posts[pid] for pid in post_ids if pid in self._posts]

    async def find_and_increment_views(self, post_id: PostId) -> Optional[Post]:
        """Increment views by 1 and return the updated post."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update={"views": post.views + 1})
        self._posts[post_id] = updated
        return updated

    async def find_published(self, limit: int = 20, offset: int = 0) -> list[Post]:
        """Find published posts, most recently published first."""
        posts = _newest_first([p for p in self._posts.values() if p.is_published])
        return posts[offset : offset + limit]

    async def find_by_author(self, author_id: AuthorRef) -> list[Post]:
        """Find every post by an author."""
        return _newest_first(
            [p for p in self._posts.values() if str(p.author_id) == str(author_id)]
        )

    async def search(self, query: str, limit: int = 20) -> list[Post]:
        """Search published posts by title, content or tag."""
        needle = query.lower()

        def matches(post: Post) -> bool:
            return (
                needle in post.title.lower()
                or needle in post.content.lower()
                or any(needle in tag.lower() for tag in post.tags)
            )

        posts = [p for p in self._posts.values() if p.is_published and matches(p)]
        return _newest_first(posts)[:limit]

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._posts[post.id] = post
        return post

    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Apply a partial update to a post."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update=fields)
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Increment likes by 1."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        self._posts[post_id] = post.model_copy(update={"likes": post.likes + 1})
        return post.likes + 1

    async def decrement_likes(self, post_id: PostId) -> Optional[int]:
        """Decrement likes by 1 (minimum 0)."""
        post = self._posts.get(post_id)
        if post is None:
            return None
        likes = max(post.likes - 1, 0)
        self._posts[post_id] = post.model_copy(update={"likes": likes})
        return likes
