"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from inkwell.domain.service import PostService

from .get_post import PostResponse


class ListPostsRequest(BaseModel):
    """List posts request.

    ``query`` searches published posts, ``author_id`` lists one author's
    posts (drafts included); otherwise published posts are listed. All three
    modes are paged with ``skip`` and ``limit``.
    """

    query: str | None = None
    author_id: str | None = None
    limit: int = Field(default=20, ge=1, le=100)
    skip: int = Field(default=0, ge=0)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostResponse]
    limit: int
    skip: int


class ListPostsUseCase:
    """Use case for listing, searching and filtering posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Listing parameters

        Returns:
            Matching posts
        """
        if request.query is not None:
            mode = "search"
            posts = await self.post_service.search(
                request.query, limit=request.skip + request.limit
            )
            posts = posts[request.skip :]
        elif request.author_id is not None:
            mode = "author"
            posts = await self.post_service.list_by_author(request.author_id)
            posts = posts[request.skip : request.skip + request.limit]
        else:
            mode = "published"
            posts = await self.post_service.list_published(
                limit=request.limit, skip=request.skip
            )

        logfire.info("Posts listed", mode=mode, count=len(posts))
        return ListPostsResponse(
            posts=[PostResponse.from_post(post) for post in posts],
            limit=request.limit,
            skip=request.skip,
        )
