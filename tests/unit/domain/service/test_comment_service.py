"""Unit tests for CommentService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from inkwell.domain.error import ValidationError
from inkwell.domain.model import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, Identity, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_snapshots_author(self, unit_env, reader):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())

        comment_id = await comment_service.create_comment(
            post_id, reader, "  Great read!  "
        )

        comment = await comment_repo.find_by_id(comment_id)
        assert comment.content == "Great read!"
        assert comment.post_id == post_id
        assert str(comment.author_id) == reader.id
        assert comment.author_name == reader.name
        assert comment.author_email == reader.email

    @pytest.mark.asyncio
    async def test_missing_name_and_email_get_defaults(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        comment_id = await comment_service.create_comment(
            uuid4(), Identity(id=str(uuid4())), "Hello"
        )

        comment = await comment_repo.find_by_id(comment_id)
        assert comment.author_name == "Anonymous"
        assert comment.author_email == ""

    @pytest.mark.asyncio
    async def test_blank_content_is_rejected(self, unit_env, reader):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(uuid4(), reader, " \n ")

    @pytest.mark.asyncio
    async def test_author_must_have_a_user_id(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                uuid4(), Identity(id="anonymous"), "Hello"
            )


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_oldest_first(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)

        for offset, text in ((2, "third"), (0, "first"), (1, "second")):
            await comment_repo.save(
                Comment(
                    id=CommentId(uuid4()),
                    post_id=post_id,
                    author_id=UserId(uuid4()),
                    author_name="Reader",
                    author_email="",
                    content=text,
                    created_at=base + timedelta(minutes=offset),
                    updated_at=base + timedelta(minutes=offset),
                )
            )

        comments = await comment_service.list_comments(str(post_id))

        assert [c.content for c in comments] == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_other_posts_comments_are_excluded(self, unit_env, reader):
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        await comment_service.create_comment(post_id, reader, "Mine")
        await comment_service.create_comment(uuid4(), reader, "Elsewhere")

        comments = await comment_service.list_comments(post_id)

        assert [c.content for c in comments] == ["Mine"]

    @pytest.mark.asyncio
    async def test_malformed_post_id_lists_nothing(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.list_comments("not-a-post") == []


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env, reader):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment_id = await comment_service.create_comment(uuid4(), reader, "Oops")

        assert await comment_service.delete_comment(str(comment_id), reader.id) is True
        assert await comment_repo.find_by_id(comment_id) is None

    @pytest.mark.asyncio
    async def test_someone_else_cannot_delete(self, unit_env, reader, author):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment_id = await comment_service.create_comment(uuid4(), reader, "Mine")

        assert await comment_service.delete_comment(comment_id, author.id) is False
        assert await comment_repo.find_by_id(comment_id) is not None

    @pytest.mark.asyncio
    async def test_malformed_ids_are_false(self, unit_env, reader):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.delete_comment("x", reader.id) is False
        assert await comment_service.delete_comment(uuid4(), "anonymous") is False
