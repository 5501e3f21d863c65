"""PostgreSQL implementation of Like repository."""

import hashlib
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Like
from inkwell.domain.repository import LikeRepository
from inkwell.domain.value import LikeId, PostId, UserId
from inkwell.persistence.mappers import like_to_dict, row_to_like
from inkwell.persistence.tables import likes_table


def pair_lock_key(post_id: PostId, user_id: UserId) -> int:
    """Derive a signed 64-bit advisory lock key for a (post, user) pair."""
    digest = hashlib.blake2b(post_id.bytes + user_id.bytes, digest_size=8).digest()
    return int.from_bytes(digest, "big", signed=True)


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def exclusive(self, post_id: PostId, user_id: UserId) -> AsyncIterator[None]:
        """Serialize work on a (post, user) pair.

        Runs the body in a savepoint after taking a transaction-scoped
        advisory lock keyed on the pair. The lock is held until the request
        transaction ends; the savepoint rolls back the body's writes if it
        raises.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                select(func.pg_advisory_xact_lock(pair_lock_key(post_id, user_id)))
            )
            yield

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId
    ) -> Optional[Like]:
        """Find a user's like on a post."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.post_id == post_id,
                likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Like]:
        """Find all likes by a user."""
        stmt = select(likes_table).where(likes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count likes on a post."""
        stmt = (
            select(func.count())
            .select_from(likes_table)
            .where(likes_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, like: Like) -> Like:
        """Save a like (create)."""
        stmt = insert(likes_table).values(**like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete(self, like_id: LikeId) -> bool:
        """Delete a like."""
        stmt = delete(likes_table).where(likes_table.c.id == like_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
