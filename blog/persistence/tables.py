"""SQLAlchemy table definitions for the blog.

They match the schema created by the Alembic migrations. Constraint names are
load-bearing: repositories use them to tell which rule rejected a write.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects import postgresql

metadata = MetaData()

# 24-hex object identifiers
ID_LENGTH = 24

# ============================================================================
# USERS TABLE (author directory)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column("name", String(50), nullable=False),
    Column("slug", String(60), nullable=False),
    Column("description", String(200), nullable=True),
    Column("color", String(7), nullable=False, server_default="#3B82F6"),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
    UniqueConstraint("slug", name="uq_categories_slug"),
)

# Names are unique regardless of case
Index("uq_categories_name", func.lower(categories_table.c.name), unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    Column("title", String(100), nullable=False),
    Column("slug", String(120), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", String(200), nullable=True),
    Column("featured_image", Text, nullable=True),
    Column(
        "tags",
        postgresql.ARRAY(Text),
        nullable=False,
        server_default="{}",
    ),
    Column("is_published", Boolean, nullable=False, server_default="false"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    # Identities come from the external provider, so no FK to users
    Column("author_id", String(ID_LENGTH), nullable=False),
    Column(
        "category_id",
        String(ID_LENGTH),
        ForeignKey(
            "categories.id", ondelete="RESTRICT", name="fk_posts_category_id"
        ),
        nullable=False,
    ),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
    UniqueConstraint("slug", name="uq_posts_slug"),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_category_id", posts_table.c.category_id)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (owned by posts)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(ID_LENGTH), primary_key=True),
    # Append order, breaks ties between equal timestamps
    Column("seq", BigInteger, Identity(), nullable=False),
    Column(
        "post_id",
        String(ID_LENGTH),
        ForeignKey("posts.id", ondelete="CASCADE", name="fk_comments_post_id"),
        nullable=False,
    ),
    Column("user_id", String(ID_LENGTH), nullable=False),
    Column("content", String(2000), nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)

Index("idx_comments_post_id", comments_table.c.post_id)
