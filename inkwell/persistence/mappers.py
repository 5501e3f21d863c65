"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from inkwell.domain.model import Comment, Like, Post
from inkwell.domain.value import (
    CommentId,
    LikeId,
    PostId,
    PostStatus,
    UserId,
    normalize_author_ref,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt") or "",
        author_id=normalize_author_ref(row["author_id"]),
        author_name=row["author_name"],
        author_email=row["author_email"],
        category=row["category"],
        tags=list(row.get("tags") or []),
        featured_image=row.get("featured_image"),
        status=PostStatus(row["status"]),
        published_at=row.get("published_at"),
        read_time=row["read_time"],
        likes=row["likes"],
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post_fields_to_columns(post.model_dump())


def post_fields_to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert post field values to their column representation.

    Args:
        fields: Post field values (full or partial)

    Returns:
        Dict suitable for database insertion/update
    """
    columns = dict(fields)
    if "author_id" in columns:
        columns["author_id"] = str(columns["author_id"])
    if isinstance(columns.get("status"), PostStatus):
        columns["status"] = columns["status"].value
    return columns


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        author_name=row["author_name"],
        author_email=row["author_email"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model.

    Args:
        row: Database row as dict

    Returns:
        Like domain model
    """
    return Like(
        id=LikeId(_as_uuid(row["id"])),
        post_id=PostId(_as_uuid(row["post_id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict.

    Args:
        like: Like domain model

    Returns:
        Dict suitable for database insertion
    """
    return like.model_dump()
