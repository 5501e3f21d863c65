"""Post domain service."""

import math
from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from inkwell.config import ContentSettings
from inkwell.domain.error import ValidationError
from inkwell.domain.model.post import Post, PostPatch
from inkwell.domain.repository import PostRepository
from inkwell.domain.value import (
    ANONYMOUS_AUTHOR,
    Identity,
    PostId,
    PostStatus,
    normalize_author_ref,
    parse_id,
)


ANONYMOUS_NAME = "Anonymous"
ANONYMOUS_EMAIL = "anonymous@example.com"


class PostService:
    """Domain service for post operations.

    Lookups by a malformed id behave like lookups of a missing post.
    Persistence failures are logged and reported as an absent result
    (None, False or an empty list) rather than raised.
    """

    def __init__(
        self, post_repository: PostRepository, content_settings: ContentSettings
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            content_settings: Excerpt, read time and listing settings
        """
        self.post_repository = post_repository
        self.content_settings = content_settings

    async def create_post(
        self,
        title: str,
        content: str,
        author: Identity | None = None,
        excerpt: str | None = None,
        category: str | None = None,
        tags: Sequence[str] | None = None,
        featured_image: str | None = None,
        status: PostStatus = PostStatus.DRAFT,
    ) -> PostId | None:
        """Create a post.

        Args:
            title: Post title
            content: Post body
            author: Requesting identity (None for anonymous posts)
            excerpt: Summary shown in listings (derived from content if empty)
            category: Category name (defaults to the configured category)
            tags: Ordered tags
            featured_image: Optional image URL
            status: Draft or published

        Returns:
            ID of the new post, None if it could not be stored

        Raises:
            ValidationError: If title or content is missing
        """
        if not title or not title.strip():
            raise ValidationError("Title is required")
        if not content or not content.strip():
            raise ValidationError("Content is required")

        author_id = normalize_author_ref(author.id if author else None)
        now = datetime.now(timezone.utc)

        post = Post(
            id=PostId(uuid4()),
            title=title,
            content=content,
            excerpt=excerpt or self.make_excerpt(content),
            author_id=author_id,
            author_name=(author.name if author else None) or ANONYMOUS_NAME,
            author_email=(author.email if author else None) or ANONYMOUS_EMAIL,
            category=category or self.content_settings.default_category,
            tags=list(tags or []),
            featured_image=featured_image or None,
            status=status,
            published_at=now if status == PostStatus.PUBLISHED else None,
            read_time=self.calculate_read_time(content),
            likes=0,
            views=0,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "post_service.create_post",
            post_id=str(post.id),
            title=title,
            status=status.value,
            anonymous=author_id == ANONYMOUS_AUTHOR,
        ):
            try:
                saved = await self.post_repository.save(post)
            except SQLAlchemyError as e:
                logfire.error("Failed to store post", post_id=str(post.id), error=str(e))
                return None

            logfire.info(
                "Post created",
                post_id=str(saved.id),
                read_time=saved.read_time,
                tags=saved.tags,
            )
            return saved.id

    async def get_post(self, post_id: PostId | UUID | str) -> Post | None:
        """Get a post and count the read as a view.

        Args:
            post_id: Post ID (string or UUID)

        Returns:
            Post with its incremented view count, None if not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            parsed = parse_id(post_id)
            if parsed is None:
                logfire.warn("Malformed post id", post_id=str(post_id))
                return None

            try:
                post = await self.post_repository.find_and_increment_views(
                    PostId(parsed)
                )
            except SQLAlchemyError as e:
                logfire.error("Failed to read post", post_id=str(parsed), error=str(e))
                return None

            if post:
                logfire.info("Post viewed", post_id=str(post.id), views=post.views)
            else:
                logfire.warn("Post not found", post_id=str(parsed))
            return post

    async def find_post(self, post_id: PostId | UUID | str) -> Post | None:
        """Get a post without counting a view.

        Used for authorization checks and other internal lookups.

        Args:
            post_id: Post ID (string or UUID)

        Returns:
            Post if found, None otherwise
        """
        parsed = parse_id(post_id)
        if parsed is None:
            return None
        try:
            return await self.post_repository.find_by_id(PostId(parsed))
        except SQLAlchemyError as e:
            logfire.error("Failed to read post", post_id=str(parsed), error=str(e))
            return None

    async def get_posts_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Get several posts without counting views.

        Args:
            post_ids: Post IDs

        Returns:
            Existing posts in the order of ``post_ids``
        """
        if not post_ids:
            return []
        try:
            posts = await self.post_repository.find_by_ids(post_ids)
        except SQLAlchemyError as e:
            logfire.error("Failed to read posts", count=len(post_ids), error=str(e))
            return []
        by_id = {post.id: post for post in posts}
        return [by_id[pid] for pid in post_ids if pid in by_id]

    async def update_post(self, post_id: PostId | UUID | str, patch: PostPatch) -> bool:
        """Apply a partial update to a post.

        Publishing sets published_at to now, including when the post was
        already published (re-publishing refreshes the timestamp). A content
        change recomputes the read time; clearing the excerpt derives it
        again from the content.

        Args:
            post_id: Post ID (string or UUID)
            patch: Fields to change

        Returns:
            True if anything changed, False if the post doesn't exist or the
            patch changes nothing

        Raises:
            ValidationError: If the patch blanks the title or content
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            fields=sorted(patch.model_fields_set),
        ):
            current = await self.find_post(post_id)
            if current is None:
                logfire.warn("Post not found for update", post_id=str(post_id))
                return False

            requested = self._prepare_patch(current, patch)
            changes: dict[str, Any] = {
                field: value
                for field, value in requested.items()
                if getattr(current, field) != value
            }

            now = datetime.now(timezone.utc)
            if requested.get("status") == PostStatus.PUBLISHED:
                changes["published_at"] = now
            if "content" in changes:
                changes["read_time"] = self.calculate_read_time(changes["content"])

            if not changes:
                logfire.info("Post update was a no-op", post_id=str(current.id))
                return False

            changes["updated_at"] = now
            try:
                updated = await self.post_repository.update_fields(current.id, changes)
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to update post", post_id=str(current.id), error=str(e)
                )
                return False

            if updated is None:
                logfire.warn("Post disappeared during update", post_id=str(current.id))
                return False

            logfire.info(
                "Post updated",
                post_id=str(current.id),
                changed=sorted(k for k in changes if k != "updated_at"),
            )
            return True

    async def delete_post(self, post_id: PostId | UUID | str) -> bool:
        """Delete a post.

        Args:
            post_id: Post ID (string or UUID)

        Returns:
            True if a post was removed
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            parsed = parse_id(post_id)
            if parsed is None:
                logfire.warn("Malformed post id", post_id=str(post_id))
                return False
            try:
                deleted = await self.post_repository.delete(PostId(parsed))
            except SQLAlchemyError as e:
                logfire.error("Failed to delete post", post_id=str(parsed), error=str(e))
                return False

            if deleted:
                logfire.info("Post deleted", post_id=str(parsed))
            else:
                logfire.warn("Post not found for delete", post_id=str(parsed))
            return deleted

    async def list_published(self, limit: int = 20, skip: int = 0) -> list[Post]:
        """List published posts, most recently published first.

        Listing does not count as viewing.

        Args:
            limit: Maximum number of posts
            skip: Number of posts to skip

        Returns:
            Page of published posts
        """
        with logfire.span("post_service.list_published", limit=limit, skip=skip):
            try:
                posts = await self.post_repository.find_published(
                    limit=limit, offset=skip
                )
            except SQLAlchemyError as e:
                logfire.error("Failed to list posts", error=str(e))
                return []
            logfire.info("Published posts listed", count=len(posts))
            return posts

    async def list_by_author(self, author_id: UUID | str) -> list[Post]:
        """List every post by an author, drafts included.

        The author id may be given as a string or a UUID. Posts that were
        never published are listed after published ones.

        Args:
            author_id: Author reference

        Returns:
            Posts by the author
        """
        author_ref = normalize_author_ref(author_id)
        with logfire.span("post_service.list_by_author", author_id=str(author_ref)):
            try:
                posts = await self.post_repository.find_by_author(author_ref)
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to list author posts", author_id=str(author_ref), error=str(e)
                )
                return []
            logfire.info("Author posts listed", author_id=str(author_ref), count=len(posts))
            return posts

    async def search(self, query: str, limit: int | None = None) -> list[Post]:
        """Search published posts by title, content or tag.

        Args:
            query: Text to look for (case-insensitive, literal)
            limit: Maximum number of results (defaults to the configured limit)

        Returns:
            Matching published posts, most recently published first
        """
        limit = self.content_settings.search_limit if limit is None else limit
        query = (query or "").strip()
        with logfire.span("post_service.search", query=query, limit=limit):
            try:
                posts = await self.post_repository.search(query, limit=limit)
            except SQLAlchemyError as e:
                logfire.error("Post search failed", query=query, error=str(e))
                return []
            logfire.info("Post search completed", query=query, count=len(posts))
            return posts

    def calculate_read_time(self, content: str) -> int:
        """Estimate reading time in whole minutes (at least 1).

        Args:
            content: Post body

        Returns:
            ceil(word count / words per minute), minimum 1
        """
        words = len(content.split())
        return max(1, math.ceil(words / self.content_settings.words_per_minute))

    def make_excerpt(self, content: str) -> str:
        """Derive an excerpt from the start of the content.

        Args:
            content: Post body

        Returns:
            The first ``excerpt_length`` characters followed by an ellipsis
        """
        return content[: self.content_settings.excerpt_length] + "..."

    def _prepare_patch(self, current: Post, patch: PostPatch) -> dict[str, Any]:
        """Validate a patch and fill defaults for cleared fields."""
        fields = patch.model_dump(exclude_unset=True)

        for required in ("title", "content"):
            if required in fields and not (fields[required] or "").strip():
                raise ValidationError(f"{required.capitalize()} cannot be empty")

        if "status" in fields and fields["status"] is None:
            del fields["status"]
        if "category" in fields:
            fields["category"] = (
                fields["category"] or self.content_settings.default_category
            )
        if "tags" in fields:
            fields["tags"] = list(fields["tags"] or [])
        if "featured_image" in fields:
            fields["featured_image"] = fields["featured_image"] or None
        if "excerpt" in fields and not fields["excerpt"]:
            fields["excerpt"] = self.make_excerpt(fields.get("content", current.content))

        return fields
