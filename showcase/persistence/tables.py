"""SQLAlchemy table definitions for Showcase.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SUBMISSIONS TABLE
# ============================================================================
submissions_table = Table(
    "submissions",
    metadata,
    # Identifier of the external showcase entry (e.g. pen slug)
    Column("id", String(64), primary_key=True),
    Column("owner_id", UUID(as_uuid=True), nullable=False),
    Column("title", String(200), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    # One submission per user
    UniqueConstraint("owner_id", name="uq_submission_owner"),
    CheckConstraint("char_length(title) >= 1", name="title_not_empty"),
)

Index("idx_submissions_created_at", submissions_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "submission_id",
        String(64),
        ForeignKey("submissions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint("submission_id", "voter_id", name="uq_vote_submission_voter"),
)

# Vote cap check counts by voter
Index("idx_votes_voter_id", votes_table.c.voter_id)
