"""create users and messages

Revision ID: a1c3e5f7b902
Revises:
Create Date: 2026-10-17 09:12:41.504311

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "a1c3e5f7b902"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the user and message tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "messages",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("sender", sa.Text(), nullable=False),
        sa.Column("receiver", sa.Text(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_messages_sender_receiver", "messages", ["sender", "receiver"])
    op.create_index(op.f("ix_messages_timestamp"), "messages", ["timestamp"])


def downgrade() -> None:
    """Drop the user and message tables."""
    op.drop_index(op.f("ix_messages_timestamp"), table_name="messages")
    op.drop_index("ix_messages_sender_receiver", table_name="messages")
    op.drop_table("messages")
    op.drop_table("users")
