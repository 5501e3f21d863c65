"""In-memory comment repository for testing."""

from typing import Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """Comments held in a dict keyed by id."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        return sorted(
            (c for c in self._comments.values() if c.post_id == post_id),
            key=lambda c: (c.created_at, str(c.id)),
        )

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete_by_author(self, comment_id: CommentId, author_id: UserId) -> bool:
        stored = self._comments.get(comment_id)
        if stored is None or stored.author_id != author_id:
            return False
        del self._comments[comment_id]
        return True
