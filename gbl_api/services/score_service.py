"""Leaderboard score service — listing and the per-user score upsert.

Business Rules:
- At most one scores row per user, held by the unique key on scores.user_id
- The write is one INSERT-or-UPDATE statement keyed on user_id, so two
  concurrent updates for the same user can never leave two rows
- The reported operation comes from a read before the write; under a race it
  may say "insert" for a statement that updated, the stored row is still single

Called by: routers/scores.py
Depends on: database, services/user_service.py
"""

from dataclasses import replace

from loguru import logger

from ..database import Database, WriteResult
from .user_service import user_exists

_SCORES_SQL = """
    SELECT
        s.id AS score_id,
        s.score,
        u.id AS user_id,
        u.name AS user_name,
        u.position AS user_position,
        u.url_photo AS user_photo
    FROM scores s
    INNER JOIN users u ON s.user_id = u.id
    ORDER BY s.score DESC, s.id DESC
"""

_UPSERT_SQL = {
    "mysql": (
        "INSERT INTO scores (user_id, score) VALUES (:user_id, :score) AS new "
        "ON DUPLICATE KEY UPDATE score = new.score"
    ),
}
_UPSERT_SQL_DEFAULT = (
    "INSERT INTO scores (user_id, score) VALUES (:user_id, :score) "
    "ON CONFLICT (user_id) DO UPDATE SET score = excluded.score"
)


class UserNotFoundError(LookupError):
    """Raised when a score is written for a user id that does not exist."""


def list_scores(db: Database) -> list[dict]:
    """Every score joined to its owner, highest first, newest first on ties."""
    return db.query(_SCORES_SQL)


def has_score(db: Database, user_id: int) -> bool:
    return bool(db.query("SELECT id FROM scores WHERE user_id = :user_id", {"user_id": user_id}))


def upsert_score_sql(dialect: str) -> str:
    return _UPSERT_SQL.get(dialect, _UPSERT_SQL_DEFAULT)


def update_score(db: Database, user_id: int, score: float) -> tuple[str, WriteResult]:
    """Set the user's score, creating the row on first write.

    Returns (operation, write_result) where operation is "insert" or "update".
    Raises UserNotFoundError if the user does not exist.
    """
    if not user_exists(db, user_id):
        raise UserNotFoundError(user_id)

    operation = "update" if has_score(db, user_id) else "insert"
    result = db.query(upsert_score_sql(db.dialect), {"user_id": user_id, "score": score})
    if operation == "update":
        # No row was inserted; lastrowid would be left over from an earlier statement
        result = replace(result, insert_id=None)
    logger.info("Score {} for user {}: {}", operation, user_id, score)
    return operation, result
