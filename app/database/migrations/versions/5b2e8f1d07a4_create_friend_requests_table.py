"""create friend requests table

Revision ID: 5b2e8f1d07a4
Revises: 3854834d3c61
Create Date: 2026-10-12 10:21:45.508213

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy import func

# revision identifiers, used by Alembic.
revision: str = '5b2e8f1d07a4'
down_revision: Union[str, Sequence[str], None] = '3854834d3c61'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "friend_requests",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("sender_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("receiver_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), onupdate=func.now()),
    )
    op.create_index(
        "uq_friend_requests_pending_pair",
        "friend_requests",
        ["sender_id", "receiver_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
        sqlite_where=sa.text("status = 'pending'"),
    )


def downgrade() -> None:
    op.drop_index("uq_friend_requests_pending_pair", table_name="friend_requests")
    op.drop_table("friend_requests")
