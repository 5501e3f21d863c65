"""In-memory like repository for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError

from inkwell.domain.model.like import Like
from inkwell.domain.repository.like import LikeRepository
from inkwell.domain.value import LikeId, PostId, UserId

Pair = tuple[PostId, UserId]


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Likes are indexed by (post, user) pair. A pair's lock lives only while
    some toggle holds or waits for it.
    """

    def __init__(self) -> None:
        self._likes: dict[LikeId, Like] = {}
        self._by_pair: dict[Pair, LikeId] = {}
        self._locks: dict[Pair, asyncio.Lock] = {}
        self._lock_users: dict[Pair, int] = {}

    @asynccontextmanager
    async def exclusive(self, post_id: PostId, user_id: UserId) -> AsyncIterator[None]:
        """Serialize work on a (post, user) pair, undoing that pair's writes on error."""
        pair = (post_id, user_id)
        lock = self._locks.setdefault(pair, asyncio.Lock())
        self._lock_users[pair] = self._lock_users.get(pair, 0) + 1
        try:
            async with lock:
                before = self._pair_like(pair)
                try:
                    yield
                except Exception:
                    self._restore_pair(pair, before)
                    raise
        finally:
            self._lock_users[pair] -= 1
            if not self._lock_users[pair]:
                del self._lock_users[pair]
                del self._locks[pair]

    def _pair_like(self, pair: Pair) -> Optional[Like]:
        like_id = self._by_pair.get(pair)
        return self._likes[like_id] if like_id is not None else None

    def _restore_pair(self, pair: Pair, like: Optional[Like]) -> None:
        current = self._by_pair.pop(pair, None)
        if current is not None:
            del self._likes[current]
        if like is not None:
            self._likes[like.id] = like
            self._by_pair[pair] = like.id

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        return self._pair_like((post_id, user_id))

    async def find_by_user(self, user_id: UserId) -> list[Like]:
        """Find all likes by a user."""
        return [like for like in self._likes.values() if like.user_id == user_id]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        return sum(1 for like in self._likes.values() if like.post_id == post_id)

    async def save(self, like: Like) -> Like:
        """Save a like (create)."""
        pair = (like.post_id, like.user_id)
        if pair in self._by_pair:
            raise IntegrityError(
                "INSERT INTO likes", {"post_id": str(like.post_id)}, Exception("unique_like")
            )
        self._likes[like.id] = like
        self._by_pair[pair] = like.id
        return like

    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like."""
        like = self._likes.pop(like_id, None)
        if like is None:
            return False
        del self._by_pair[(like.post_id, like.user_id)]
        return True
