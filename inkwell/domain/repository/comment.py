"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Storage for comments.

    The store does not check that ``post_id`` refers to an existing post.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Comments on a post in the order they were written.

        Ties on ``created_at`` are broken by id so the order is stable.
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def delete_by_author(self, comment_id: CommentId, author_id: UserId) -> bool:
        """Remove a comment in one step, only if ``author_id`` wrote it.

        Args:
            comment_id: Comment to remove
            author_id: Must equal the stored author exactly

        Returns:
            True if a comment was removed
        """
        pass
