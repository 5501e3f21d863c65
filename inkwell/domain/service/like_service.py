"""Like domain service."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.like import Like
from inkwell.domain.model.post import Post
from inkwell.domain.repository import LikeRepository, PostRepository
from inkwell.domain.value import (
    LikeId,
    LikeOutcome,
    LikeToggleResult,
    PostId,
    UserId,
    parse_id,
)

from .post_service import PostService


class LikeService:
    """Domain service for like operations.

    The like records are the source of truth; each post's ``likes`` field
    is a counter kept in step with them inside the same guarded section.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        post_service: PostService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository (for the atomic like counter)
            post_service: Post domain service
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.post_service = post_service

    async def toggle_like(
        self, post_id: PostId | UUID | str, user_id: UserId | UUID | str
    ) -> LikeToggleResult:
        """Like a post, or remove the like if the user already likes it.

        The lookup, the like insert/delete and the counter update run inside
        a section that is exclusive per (post, user) pair, so two concurrent
        toggles for the same pair cannot both insert.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Toggle result; ``ok`` is False when nothing was applied
        """
        with logfire.span(
            "like_service.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            parsed_post = parse_id(post_id)
            parsed_user = parse_id(user_id)
            if parsed_post is None or parsed_user is None:
                logfire.warn(
                    "Malformed id in like toggle",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                return LikeToggleResult(outcome=LikeOutcome.POST_NOT_FOUND)

            pid = PostId(parsed_post)
            uid = UserId(parsed_user)

            post = await self.post_service.find_post(pid)
            if post is None:
                logfire.warn("Like on non-existent post", post_id=str(pid))
                return LikeToggleResult(outcome=LikeOutcome.POST_NOT_FOUND)

            try:
                async with self.like_repository.exclusive(pid, uid):
                    existing = await self.like_repository.find_by_post_and_user(
                        pid, uid
                    )
                    if existing:
                        await self.like_repository.delete(existing.id)
                        likes_count = await self.post_repository.decrement_likes(pid)
                    else:
                        await self.like_repository.save(
                            Like(
                                id=LikeId(uuid4()),
                                post_id=pid,
                                user_id=uid,
                                created_at=datetime.now(timezone.utc),
                            )
                        )
                        likes_count = await self.post_repository.increment_likes(pid)

                    if likes_count is None:
                        raise NotFoundError("Post", str(pid))
            except NotFoundError:
                logfire.warn("Post deleted during like toggle", post_id=str(pid))
                return LikeToggleResult(outcome=LikeOutcome.POST_NOT_FOUND)
            except SQLAlchemyError as e:
                logfire.error(
                    "Like toggle failed",
                    post_id=str(pid),
                    user_id=str(uid),
                    error=str(e),
                )
                return LikeToggleResult(outcome=LikeOutcome.FAILED)

            liked = existing is None
            logfire.info(
                "Like toggled",
                post_id=str(pid),
                user_id=str(uid),
                liked=liked,
                likes_count=likes_count,
            )
            return LikeToggleResult(
                outcome=LikeOutcome.LIKED if liked else LikeOutcome.UNLIKED,
                liked=liked,
                likes_count=likes_count,
            )

    async def has_liked(
        self, post_id: PostId | UUID | str, user_id: UserId | UUID | str
    ) -> bool:
        """Check whether a user currently likes a post.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            True if a like record exists for the pair
        """
        parsed_post = parse_id(post_id)
        parsed_user = parse_id(user_id)
        if parsed_post is None or parsed_user is None:
            return False

        try:
            like = await self.like_repository.find_by_post_and_user(
                PostId(parsed_post), UserId(parsed_user)
            )
        except SQLAlchemyError as e:
            logfire.error(
                "Like lookup failed",
                post_id=str(parsed_post),
                user_id=str(parsed_user),
                error=str(e),
            )
            return False
        return like is not None

    async def liked_post_ids(self, user_id: UserId | UUID | str) -> list[PostId]:
        """List the IDs of posts a user likes, most recently liked first.

        Args:
            user_id: User ID

        Returns:
            Post IDs (may include posts deleted since they were liked)
        """
        parsed = parse_id(user_id)
        if parsed is None:
            return []

        try:
            likes = await self.like_repository.find_by_user(UserId(parsed))
        except SQLAlchemyError as e:
            logfire.error("Liked posts lookup failed", user_id=str(parsed), error=str(e))
            return []

        likes.sort(key=lambda like: like.created_at, reverse=True)
        return [like.post_id for like in likes]

    async def liked_posts(self, user_id: UserId | UUID | str) -> list[Post]:
        """List the posts a user likes, skipping posts that no longer exist.

        Does not count views.

        Args:
            user_id: User ID

        Returns:
            Liked posts, most recently liked first
        """
        with logfire.span("like_service.liked_posts", user_id=str(user_id)):
            post_ids = await self.liked_post_ids(user_id)
            posts = await self.post_service.get_posts_by_ids(post_ids)
            logfire.info("Liked posts listed", user_id=str(user_id), count=len(posts))
            return posts
