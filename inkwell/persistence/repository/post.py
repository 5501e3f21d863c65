"""PostgreSQL implementation of Post repository."""

from typing import Any, List, Optional, Sequence

import logfire
from sqlalchemy import Select, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Post
from inkwell.domain.repository.post import PostRepository
from inkwell.domain.value import AuthorRef, PostId, PostStatus
from inkwell.persistence.mappers import (
    post_fields_to_columns,
    post_to_dict,
    row_to_post,
)
from inkwell.persistence.tables import posts_table


def escape_like(query: str) -> str:
    """Escape LIKE wildcards so the query matches literally."""
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_statement(query: str, limit: int) -> Select:
    """Published posts whose title, content or any single tag contains ``query``.

    Each tag is matched on its own, so a query never spans two tags.
    """
    pattern = f"%{escape_like(query)}%"
    tag = func.unnest(posts_table.c.tags).table_valued("tag").render_derived()
    tag_matches = (
        select(tag.c.tag)
        .where(tag.c.tag.ilike(pattern, escape="\\"))
        .correlate(posts_table)
        .exists()
    )

    return (
        select(posts_table)
        .where(posts_table.c.status == PostStatus.PUBLISHED.value)
        .where(
            posts_table.c.title.ilike(pattern, escape="\\")
            | posts_table.c.content.ilike(pattern, escape="\\")
            | tag_matches
        )
        .order_by(
            posts_table.c.published_at.desc().nulls_last(),
            desc(posts_table.c.created_at),
        )
        .limit(limit)
    )


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts by ID."""
        if not post_ids:
            return []

        stmt = select(posts_table).where(posts_table.c.id.in_(post_ids))
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_and_increment_views(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment views by 1 and return the updated post."""
        with logfire.span(
            "post_repository.find_and_increment_views", post_id=str(post_id)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(views=posts_table.c.views + 1)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None
            return row_to_post(row._asdict())

    async def find_published(self, limit: int = 20, offset: int = 0) -> List[Post]:
        """Find published posts, most recently published first."""
        with logfire.span(
            "post_repository.find_published", limit=limit, offset=offset
        ):
            stmt = (
                select(posts_table)
                .where(posts_table.c.status == PostStatus.PUBLISHED.value)
                .order_by(
                    posts_table.c.published_at.desc().nulls_last(),
                    desc(posts_table.c.created_at),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found published posts", count=len(posts))
            return posts

    async def find_by_author(self, author_id: AuthorRef) -> List[Post]:
        """Find every post by an author, never-published posts last."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == str(author_id))
            .order_by(
                posts_table.c.published_at.desc().nulls_last(),
                desc(posts_table.c.created_at),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def search(self, query: str, limit: int = 20) -> List[Post]:
        """Search published posts by title, content or tag."""
        with logfire.span("post_repository.search", query=query, limit=limit):
            result = await self.session.execute(search_statement(query, limit))
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Search matched posts", count=len(posts))
            return posts

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), title=post.title
        ):
            stmt = insert(posts_table).values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def update_fields(
        self, post_id: PostId, fields: dict[str, Any]
    ) -> Optional[Post]:
        """Apply a partial update to a post."""
        with logfire.span(
            "post_repository.update_fields",
            post_id=str(post_id),
            fields=sorted(fields),
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**post_fields_to_columns(fields))
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None
            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically increment likes by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(likes=posts_table.c.likes + 1)
            .returning(posts_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def decrement_likes(self, post_id: PostId) -> Optional[int]:
        """Atomically decrement likes by 1 (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(likes=func.greatest(posts_table.c.likes - 1, 0))
            .returning(posts_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()
