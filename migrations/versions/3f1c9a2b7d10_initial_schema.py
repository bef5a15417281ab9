"""initial_schema

Create the vote ledger schema:
- Submissions (one external showcase entry per user)
- Votes (one per submission and voter, removed with their submission)

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # SUBMISSIONS table
    # ========================================================================
    op.create_table(
        "submissions",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", name="uq_submission_owner"),
        sa.CheckConstraint("char_length(title) >= 1", name="title_not_empty"),
    )
    op.create_index("idx_submissions_created_at", "submissions", ["created_at"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("submission_id", sa.String(length=64), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["submission_id"], ["submissions.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "submission_id", "voter_id", name="uq_vote_submission_voter"
        ),
    )
    op.create_index("idx_votes_voter_id", "votes", ["voter_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_submissions_created_at", table_name="submissions")
    op.drop_table("submissions")
