"""Like repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional

from inkwell.domain.model.like import Like
from inkwell.domain.value import LikeId, PostId, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    def exclusive(
        self, post_id: PostId, user_id: UserId
    ) -> AbstractAsyncContextManager[None]:
        """Serialize work on a single (post, user) pair.

        Concurrent holders for the same pair run one after another; holders
        for different pairs never wait on each other. If the body raises,
        writes made inside it are rolled back.

        Args:
            post_id: The post ID
            user_id: The user ID

        Returns:
            Async context manager guarding the pair
        """
        pass

    @abstractmethod
    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post.

        Args:
            post_id: The post ID
            user_id: The user's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Like]:
        """Find all likes by a user.

        Args:
            user_id: The user's ID

        Returns:
            List of likes by the user
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of like records for the post
        """
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already likes the post
        """
        pass

    @abstractmethod
    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like.

        Args:
            like_id: The like ID to delete

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
