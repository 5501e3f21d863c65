"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from inkwell.domain.model.post import Post
from inkwell.domain.value import AuthorRef, PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID without counting a view.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts by ID (batch query, no view counting).

        Args:
            post_ids: Post IDs to look up

        Returns:
            The posts that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_and_increment_views(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment views by 1 and return the updated post.

        Must be a single read-and-bump so that concurrent readers never
        lose an increment.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post with its incremented view count, None if not found
        """
        pass

    @abstractmethod
    async def find_published(self, limit: int = 20, offset: int = 0) -> List[Post]:
        """Find published posts, most recently published first.

        Args:
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of published posts
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: AuthorRef) -> List[Post]:
        """Find every post by an author regardless of status.

        Ordered by published_at descending; posts that were never published
        come last, newest first.

        Args:
            author_id: The author reference as stored on posts

        Returns:
            List of posts by the author
        """
        pass

    @abstractmethod
    async def search(self, query: str, limit: int = 20) -> List[Post]:
        """Search published posts.

        Case-insensitive literal substring match against title, content
        or any tag.

        Args:
            query: Text to look for
            limit: Maximum number of posts to return

        Returns:
            Matching published posts, most recently published first
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Apply a partial update to a post.

        Args:
            post_id: ID of the post to update
            fields: Column values to set

        Returns:
            Updated Post entity, or None if post doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically increment likes by 1.

        Args:
            post_id: The post ID

        Returns:
            The new like count, None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def decrement_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically decrement likes by 1 (minimum 0).

        Args:
            post_id: The post ID

        Returns:
            The new like count, None if the post doesn't exist
        """
        pass
