"""SQLAlchemy table definitions for AskIt.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("username", String(30), nullable=False),
    Column("email", String(255), nullable=False),  # Lowercased
    Column("password_hash", String(255), nullable=False),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column("bio", String(500), nullable=False, server_default=""),
    Column("avatar_url", Text, nullable=True),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "last_active", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_reputation", users_table.c.reputation.desc())
# Names of soft-deleted users may be taken again
Index(
    "uq_users_username_active",
    users_table.c.username,
    unique=True,
    postgresql_where=~users_table.c.is_deleted,
)
Index(
    "uq_users_email_active",
    users_table.c.email,
    unique=True,
    postgresql_where=~users_table.c.is_deleted,
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("name", String(20), nullable=False),
    Column("description", String(500), nullable=False, server_default=""),
    Column("color", String(7), nullable=False, server_default="#3b82f6"),
    Column("question_count", Integer, nullable=False, server_default="0"),
    Column("is_official", Boolean, nullable=False, server_default="false"),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tags_question_count", tags_table.c.question_count.desc())
Index(
    "uq_tags_name_active",
    tags_table.c.name,
    unique=True,
    postgresql_where=~tags_table.c.is_deleted,
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
# Vote sets and tag references are stored on the row as UUID arrays.
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("upvoters", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvoters", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("accepted_answer_id", UUID, nullable=True),
    Column("is_closed", Boolean, nullable=False, server_default="false"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column(
        "last_activity",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_last_activity", questions_table.c.last_activity.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tag_ids", questions_table.c.tag_ids, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("upvoters", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvoters", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
# At most one accepted answer per question
Index(
    "uq_answers_accepted_per_question",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "type",
        postgresql.ENUM(
            "question_answered",
            "answer_voted",
            "question_voted",
            "answer_accepted",
            "comment_added",
            "user_mentioned",
            "admin_action",
            "system_message",
            name="notification_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("message", String(1000), nullable=False),
    Column("payload", JSONB, nullable=False, server_default="{}"),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    notifications_table.c.is_read,
)
