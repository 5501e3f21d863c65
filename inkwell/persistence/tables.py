"""SQLAlchemy table definitions for Inkwell.

They match the schema defined in Alembic migrations. The users table is
owned by the authentication service and is not declared here, so author
and user ids carry no foreign keys.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", Text, nullable=False, server_default=""),
    # UUID text for signed-in authors, raw string (e.g. 'anonymous') otherwise
    Column("author_id", String(255), nullable=False),
    Column("author_name", String(255), nullable=False),  # Snapshot at creation
    Column("author_email", String(255), nullable=False),  # Snapshot at creation
    Column("category", String(100), nullable=False, server_default="General"),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("featured_image", Text, nullable=True),
    Column(
        "status",
        Enum("draft", "published", name="post_status", create_type=False),
        nullable=False,
        server_default="draft",
    ),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("read_time", Integer, nullable=False, server_default="1"),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("read_time >= 1", name="read_time_positive"),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

Index("idx_posts_published_at", posts_table.c.published_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_status", posts_table.c.status)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("author_name", String(255), nullable=False),  # Snapshot at creation
    Column("author_email", String(255), nullable=False),  # Snapshot at creation
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, nullable=False),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="unique_like"),
)

Index("idx_likes_user_id", likes_table.c.user_id)
