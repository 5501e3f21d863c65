"""Unit tests for like use cases."""

from uuid import uuid4

import pytest

from inkwell.application.usecase.like import (
    CheckLikeRequest,
    CheckLikeUseCase,
    ListLikedPostsRequest,
    ListLikedPostsUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from inkwell.application.usecase.post import CreatePostRequest, CreatePostUseCase
from inkwell.domain.value import LikeOutcome, PostStatus
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def publish(unit_env, author, title: str = "Liked post") -> str:
    create_post_use_case = await unit_env.get(CreatePostUseCase)
    response = await create_post_use_case.execute(
        CreatePostRequest(
            title=title, content="Body", status=PostStatus.PUBLISHED, author=author
        )
    )
    return response.post_id


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env, author, reader):
        toggle_like_use_case = await unit_env.get(ToggleLikeUseCase)
        post_id = await publish(unit_env, author)
        request = ToggleLikeRequest(post_id=post_id, user_id=reader.id)

        liked = await toggle_like_use_case.execute(request)
        unliked = await toggle_like_use_case.execute(request)

        assert (liked.outcome, liked.liked, liked.likes_count) == (
            LikeOutcome.LIKED,
            True,
            1,
        )
        assert (unliked.outcome, unliked.liked, unliked.likes_count) == (
            LikeOutcome.UNLIKED,
            False,
            0,
        )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env, reader):
        toggle_like_use_case = await unit_env.get(ToggleLikeUseCase)

        response = await toggle_like_use_case.execute(
            ToggleLikeRequest(post_id=str(uuid4()), user_id=reader.id)
        )

        assert response.outcome == LikeOutcome.POST_NOT_FOUND


class TestCheckLikeUseCase:
    """Tests for CheckLikeUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_never_likes(self, unit_env, author):
        check_like_use_case = await unit_env.get(CheckLikeUseCase)
        post_id = await publish(unit_env, author)

        response = await check_like_use_case.execute(CheckLikeRequest(post_id=post_id))

        assert response.liked is False


class TestListLikedPostsUseCase:
    """Tests for ListLikedPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_liked_posts(self, unit_env, author, reader):
        toggle_like_use_case = await unit_env.get(ToggleLikeUseCase)
        list_liked_posts_use_case = await unit_env.get(ListLikedPostsUseCase)
        liked_id = await publish(unit_env, author, "Liked")
        await publish(unit_env, author, "Ignored")
        await toggle_like_use_case.execute(
            ToggleLikeRequest(post_id=liked_id, user_id=reader.id)
        )

        response = await list_liked_posts_use_case.execute(
            ListLikedPostsRequest(user_id=reader.id)
        )

        assert [p.post_id for p in response.posts] == [liked_id]
        assert response.posts[0].likes == 1
