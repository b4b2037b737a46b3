"""
startup.py — Schema creation on boot (idempotent)

Tables, columns and the scores.user_id unique key are defined in the ORM
models and created via Base.metadata.create_all(checkfirst=True).
create_all skips tables that already exist, so a scores table carried over
from an older deployment gets its unique key here: duplicate rows per user
are collapsed to the newest one, then the key is added.
Managed deployments can disable this with AUTO_CREATE_TABLES=false and
use the Alembic revisions instead.

Called by: main.py lifespan
Depends on: database.py (Database), models (Base)
"""

from loguru import logger
from sqlalchemy import inspect

from .database import Database
from .models import Base

SCORE_USER_KEY = "uq_scores_user_id"

# Keep the newest row per user. The derived table lets MySQL delete from the
# table it selects from.
DEDUPE_SCORES_SQL = """
    DELETE FROM scores
    WHERE id NOT IN (
        SELECT keep_id FROM (
            SELECT MAX(id) AS keep_id FROM scores GROUP BY user_id
        ) AS keep
    )
"""


def init_schema(db: Database) -> None:
    """Create any missing tables and keys. Safe to call on every app boot."""
    Base.metadata.create_all(bind=db.engine, checkfirst=True)
    logger.info("ORM schema sync complete (create_all checkfirst=True)")
    ensure_score_user_key(db)


def has_score_user_key(db: Database) -> bool:
    insp = inspect(db.engine)
    uniques = insp.get_unique_constraints("scores")
    indexes = [i for i in insp.get_indexes("scores") if i.get("unique")]
    return any(u["column_names"] == ["user_id"] for u in uniques + indexes)


def ensure_score_user_key(db: Database) -> None:
    """Add the scores.user_id unique key to a table created without it."""
    if has_score_user_key(db):
        return
    result = db.query(DEDUPE_SCORES_SQL)
    db.query(f"CREATE UNIQUE INDEX {SCORE_USER_KEY} ON scores (user_id)")
    logger.warning(
        "Added {} to existing scores table ({} duplicate rows removed)",
        SCORE_USER_KEY, result.affected_rows,
    )
