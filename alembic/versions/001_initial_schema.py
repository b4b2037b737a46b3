"""initial schema - users, scores, user_login

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Matches the tables as the original deployment created them, without the
scores.user_id unique key (added in 002_scores_user_key).

For EXISTING databases: run `alembic stamp 001_initial`, then `alembic upgrade head`.
For NEW databases: run `alembic upgrade head`.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("position", sa.String(255), nullable=False),
        sa.Column("url_photo", sa.String(1024), nullable=False),
    )
    op.create_table(
        "scores",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("score", sa.Float(), nullable=False),
    )
    op.create_table(
        "user_login",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
    )
    op.create_index("ix_user_login_username", "user_login", ["username"])


def downgrade() -> None:
    """Drop all tables. DESTRUCTIVE — only for dev/test environments."""
    op.drop_index("ix_user_login_username", table_name="user_login")
    op.drop_table("user_login")
    op.drop_table("scores")
    op.drop_table("users")
