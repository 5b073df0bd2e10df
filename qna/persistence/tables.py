"""SQLAlchemy table definitions for the Q&A platform.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
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
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=False),  # Stored lower-cased
    Column("image", Text, nullable=True),
    Column("bio", Text, nullable=False, server_default=""),
    Column("location", String(255), nullable=False, server_default=""),
    Column("joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("images", ARRAY(Text), nullable=False, server_default="{}"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    CheckConstraint("views >= 0", name="views_non_negative"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("accepted", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "answer_id",
        UUID(as_uuid=True),
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_reply_id",
        UUID(as_uuid=True),
        ForeignKey("replies.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)

Index("idx_replies_answer_parent", replies_table.c.answer_id, replies_table.c.parent_reply_id)
Index("idx_replies_author_id", replies_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id",
        UUID(as_uuid=True),
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    CheckConstraint(
        "(question_id IS NULL) <> (answer_id IS NULL)",
        name="comment_single_target",
    ),
)

Index("idx_comments_question_id", comments_table.c.question_id)
Index("idx_comments_answer_id", comments_table.c.answer_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "votable_type",
        Enum("question", "answer", "reply", "comment", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID(as_uuid=True), nullable=False),
    Column(
        "vote_type",
        Enum("up", "down", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)
