"""Unit tests for InMemoryLikeRepository."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from inkwell.domain.model import Like
from inkwell.domain.value import LikeId, PostId, UserId
from inkwell.persistence.repository.inmemory import InMemoryLikeRepository


def make_like(post_id: PostId, user_id: UserId) -> Like:
    return Like(
        id=LikeId(uuid4()),
        post_id=post_id,
        user_id=user_id,
        created_at=datetime.now(timezone.utc),
    )


class TestExclusive:
    """Tests for the per-pair guarded section."""

    @pytest.mark.asyncio
    async def test_error_undoes_only_this_pair(self):
        like_repo = InMemoryLikeRepository()
        post_id = PostId(uuid4())
        user_id, other_user = UserId(uuid4()), UserId(uuid4())

        with pytest.raises(RuntimeError):
            async with like_repo.exclusive(post_id, user_id):
                await like_repo.save(make_like(post_id, user_id))
                await like_repo.save(make_like(post_id, other_user))
                raise RuntimeError("counter update failed")

        assert await like_repo.find_by_post_and_user(post_id, user_id) is None
        assert await like_repo.find_by_post_and_user(post_id, other_user) is not None

    @pytest.mark.asyncio
    async def test_error_restores_a_deleted_like(self):
        like_repo = InMemoryLikeRepository()
        post_id, user_id = PostId(uuid4()), UserId(uuid4())
        like = await like_repo.save(make_like(post_id, user_id))

        with pytest.raises(RuntimeError):
            async with like_repo.exclusive(post_id, user_id):
                await like_repo.delete(like.id)
                raise RuntimeError("counter update failed")

        assert await like_repo.find_by_post_and_user(post_id, user_id) == like

    @pytest.mark.asyncio
    async def test_idle_pairs_release_their_locks(self):
        like_repo = InMemoryLikeRepository()

        for _ in range(3):
            async with like_repo.exclusive(PostId(uuid4()), UserId(uuid4())):
                pass

        assert like_repo._locks == {}


class TestSave:
    @pytest.mark.asyncio
    async def test_second_like_for_pair_is_rejected(self):
        like_repo = InMemoryLikeRepository()
        post_id, user_id = PostId(uuid4()), UserId(uuid4())
        await like_repo.save(make_like(post_id, user_id))

        with pytest.raises(IntegrityError):
            await like_repo.save(make_like(post_id, user_id))

    @pytest.mark.asyncio
    async def test_delete_frees_the_pair(self):
        like_repo = InMemoryLikeRepository()
        post_id, user_id = PostId(uuid4()), UserId(uuid4())
        like = await like_repo.save(make_like(post_id, user_id))

        assert await like_repo.delete(like.id)
        assert not await like_repo.delete(like.id)
        assert await like_repo.save(make_like(post_id, user_id))
