"""Comment domain service."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from inkwell.domain.error import ValidationError
from inkwell.domain.model.comment import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, Identity, PostId, UserId, parse_id


class CommentService:
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId | UUID | str,
        author: Identity,
        content: str,
    ) -> CommentId | None:
        """Create a comment on a post.

        The post is not looked up here; callers comment on posts they have
        already resolved.

        Args:
            post_id: Post ID
            author: Requesting identity (must be a signed-in user)
            content: Comment text (trimmed before storing)

        Returns:
            ID of the new comment, None if it could not be stored

        Raises:
            ValidationError: If the content is blank or the ids are malformed
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Comment content is required")

        parsed_post = parse_id(post_id)
        if parsed_post is None:
            raise ValidationError(f"Invalid post id: {post_id}")
        author_id = parse_id(author.id)
        if author_id is None:
            raise ValidationError("Comments require a signed-in author")

        now = datetime.now(timezone.utc)
        comment = Comment(
            id=CommentId(uuid4()),
            post_id=PostId(parsed_post),
            author_id=UserId(author_id),
            author_name=author.name or "Anonymous",
            author_email=author.email or "",
            content=text,
            created_at=now,
            updated_at=now,
        )

        with logfire.span(
            "comment_service.create_comment",
            post_id=str(parsed_post),
            author_id=str(author_id),
        ):
            try:
                saved = await self.comment_repository.save(comment)
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to store comment", post_id=str(parsed_post), error=str(e)
                )
                return None

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(parsed_post),
                length=len(text),
            )
            return saved.id

    async def list_comments(self, post_id: PostId | UUID | str) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comments ordered by creation time
        """
        with logfire.span("comment_service.list_comments", post_id=str(post_id)):
            parsed = parse_id(post_id)
            if parsed is None:
                logfire.warn("Malformed post id", post_id=str(post_id))
                return []

            try:
                comments = await self.comment_repository.find_by_post(PostId(parsed))
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to list comments", post_id=str(parsed), error=str(e)
                )
                return []

            logfire.info("Comments retrieved for post", post_id=str(parsed), count=len(comments))
            return comments

    async def delete_comment(
        self, comment_id: CommentId | UUID | str, requesting_user_id: UserId | UUID | str
    ) -> bool:
        """Delete a comment written by the requesting user.

        The stored author id must equal the requesting id exactly; nobody
        else can delete a comment.

        Args:
            comment_id: Comment ID
            requesting_user_id: ID of the user asking for the delete

        Returns:
            True if the comment was deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(requesting_user_id),
        ):
            parsed_comment = parse_id(comment_id)
            parsed_user = parse_id(requesting_user_id)
            if parsed_comment is None or parsed_user is None:
                logfire.warn(
                    "Malformed id in comment delete",
                    comment_id=str(comment_id),
                    user_id=str(requesting_user_id),
                )
                return False

            try:
                deleted = await self.comment_repository.delete_by_author(
                    CommentId(parsed_comment), UserId(parsed_user)
                )
            except SQLAlchemyError as e:
                logfire.error(
                    "Failed to delete comment",
                    comment_id=str(parsed_comment),
                    error=str(e),
                )
                return False

            if deleted:
                logfire.info("Comment deleted", comment_id=str(parsed_comment))
            else:
                logfire.warn(
                    "Comment not deleted (missing or not the author)",
                    comment_id=str(parsed_comment),
                    user_id=str(parsed_user),
                )
            return deleted
