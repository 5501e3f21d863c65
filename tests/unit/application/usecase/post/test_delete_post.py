"""Unit tests for DeletePostUseCase."""

from uuid import UUID, uuid4

import pytest

from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
)
from inkwell.domain.error import NotAuthorizedError, NotFoundError
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_post(self, unit_env, author):
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        delete_post_use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        created = await create_post_use_case.execute(
            CreatePostRequest(title="Bye", content="Soon gone", author=author)
        )

        response = await delete_post_use_case.execute(
            DeletePostRequest(post_id=created.post_id, user_id=author.id)
        )

        assert response.deleted is True
        assert await post_repo.find_by_id(PostId(UUID(created.post_id))) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env, author, reader):
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        delete_post_use_case = await unit_env.get(DeletePostUseCase)
        created = await create_post_use_case.execute(
            CreatePostRequest(title="Mine", content="Keep out", author=author)
        )

        with pytest.raises(NotAuthorizedError):
            await delete_post_use_case.execute(
                DeletePostRequest(post_id=created.post_id, user_id=reader.id)
            )

    @pytest.mark.asyncio
    async def test_anonymous_post_cannot_be_deleted_by_a_user(self, unit_env, reader):
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        delete_post_use_case = await unit_env.get(DeletePostUseCase)
        created = await create_post_use_case.execute(
            CreatePostRequest(title="Anon", content="Nobody owns this")
        )

        with pytest.raises(NotAuthorizedError):
            await delete_post_use_case.execute(
                DeletePostRequest(post_id=created.post_id, user_id=reader.id)
            )

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env, author):
        delete_post_use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await delete_post_use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), user_id=author.id)
            )
