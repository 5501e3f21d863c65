"""Unit tests for ListPostsUseCase and GetPostUseCase."""

import pytest

from inkwell.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from inkwell.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from inkwell.domain.value import PostStatus
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def seed(unit_env, author):
    create_post_use_case = await unit_env.get(CreatePostUseCase)
    published = await create_post_use_case.execute(
        CreatePostRequest(
            title="Async Python",
            content="Event loops",
            tags=["python"],
            status=PostStatus.PUBLISHED,
            author=author,
        )
    )
    draft = await create_post_use_case.execute(
        CreatePostRequest(title="Unfinished Python", content="TBD", author=author)
    )
    return published.post_id, draft.post_id


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_default_lists_published(self, unit_env, author):
        list_posts_use_case = await unit_env.get(ListPostsUseCase)
        published_id, _ = await seed(unit_env, author)

        response = await list_posts_use_case.execute(ListPostsRequest())

        assert [p.post_id for p in response.posts] == [published_id]

    @pytest.mark.asyncio
    async def test_query_searches_published(self, unit_env, author):
        list_posts_use_case = await unit_env.get(ListPostsUseCase)
        published_id, _ = await seed(unit_env, author)

        response = await list_posts_use_case.execute(ListPostsRequest(query="python"))

        assert [p.post_id for p in response.posts] == [published_id]

    @pytest.mark.asyncio
    async def test_search_pages_with_skip(self, unit_env, author):
        create_post_use_case = await unit_env.get(CreatePostUseCase)
        list_posts_use_case = await unit_env.get(ListPostsUseCase)
        post_ids = []
        for title in ("Python one", "Python two", "Python three"):
            created = await create_post_use_case.execute(
                CreatePostRequest(
                    title=title,
                    content="Body",
                    status=PostStatus.PUBLISHED,
                    author=author,
                )
            )
            post_ids.append(created.post_id)
        everything = await list_posts_use_case.execute(ListPostsRequest(query="python"))

        response = await list_posts_use_case.execute(
            ListPostsRequest(query="python", limit=1, skip=1)
        )

        assert sorted(p.post_id for p in everything.posts) == sorted(post_ids)
        assert [p.post_id for p in response.posts] == [everything.posts[1].post_id]
        assert response.skip == 1

    @pytest.mark.asyncio
    async def test_author_lists_drafts_too(self, unit_env, author):
        list_posts_use_case = await unit_env.get(ListPostsUseCase)
        published_id, draft_id = await seed(unit_env, author)

        response = await list_posts_use_case.execute(
            ListPostsRequest(author_id=author.id)
        )

        assert [p.post_id for p in response.posts] == [published_id, draft_id]

    def test_limit_is_bounded(self):
        with pytest.raises(ValueError):
            ListPostsRequest(limit=0)
        with pytest.raises(ValueError):
            ListPostsRequest(limit=101)
        with pytest.raises(ValueError):
            ListPostsRequest(skip=-1)


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_post_counts_view_and_reports_like(self, unit_env, author, reader):
        get_post_use_case = await unit_env.get(GetPostUseCase)
        toggle_like_use_case = await unit_env.get(ToggleLikeUseCase)
        published_id, _ = await seed(unit_env, author)
        await toggle_like_use_case.execute(
            ToggleLikeRequest(post_id=published_id, user_id=reader.id)
        )

        response = await get_post_use_case.execute(
            GetPostRequest(post_id=published_id, user_id=reader.id)
        )

        assert response.views == 1
        assert response.likes == 1
        assert response.has_liked is True

    @pytest.mark.asyncio
    async def test_missing_post_is_none(self, unit_env):
        get_post_use_case = await unit_env.get(GetPostUseCase)

        assert await get_post_use_case.execute(GetPostRequest(post_id="nope")) is None
