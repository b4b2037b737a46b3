"""Add unique key on scores.user_id

Revision ID: 002_scores_user_key
Revises: 001_initial
Create Date: 2026-10-20

Collapses duplicate score rows per user to the newest one, then adds the
unique key the score upsert relies on. Skips the key if it is already
present (tables created by AUTO_CREATE_TABLES carry it).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_scores_user_key"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_key() -> bool:
    insp = sa.inspect(op.get_bind())
    uniques = insp.get_unique_constraints("scores")
    indexes = [i for i in insp.get_indexes("scores") if i.get("unique")]
    return any(u["column_names"] == ["user_id"] for u in uniques + indexes)


def upgrade() -> None:
    if _has_key():
        return
    op.execute(
        "DELETE FROM scores WHERE id NOT IN ("
        "SELECT keep_id FROM (SELECT MAX(id) AS keep_id FROM scores GROUP BY user_id) AS keep)"
    )
    with op.batch_alter_table("scores") as batch_op:
        batch_op.create_unique_constraint("uq_scores_user_id", ["user_id"])


def downgrade() -> None:
    with op.batch_alter_table("scores") as batch_op:
        batch_op.drop_constraint("uq_scores_user_id", type_="unique")
