"""SQLAlchemy table definitions for thisweknow.

Timestamps are stored as ``timestamptz`` in UTC. A user's time zone is stored
as the name they picked (legacy label or IANA identifier) and resolved when
the row is loaded.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("login", String(40), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("time_zone", String(100), nullable=True),
    Column("enabled", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
)

# ============================================================================
# SNIPPETS TABLE
# ============================================================================
snippets_table = Table(
    "snippets",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column("is_prediction", Boolean, nullable=False, server_default="false"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 1000", name="check_snippet_content"
    ),
    CheckConstraint(
        "NOT is_prediction OR expires_at IS NOT NULL",
        name="check_prediction_expiry",
    ),
)

Index(
    "idx_snippets_category_created",
    snippets_table.c.category_id,
    snippets_table.c.created_at,
)
Index("idx_snippets_user_id", snippets_table.c.user_id)

# ============================================================================
# VOTES TABLE (polymorphic: voteable_type + voteable_id)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "voteable_type",
        Enum("snippet", name="voteable_type"),
        nullable=False,
    ),
    Column("voteable_id", UUID(as_uuid=True), nullable=False),
    Column("verdict", Boolean, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per user per item
    UniqueConstraint("user_id", "voteable_type", "voteable_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_voteable", votes_table.c.voteable_type, votes_table.c.voteable_id)
