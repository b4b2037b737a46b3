"""Roster service — ranked user listing and user creation.

Usage:
    from gbl_api.services.user_service import list_ranked_users, create_user
"""

from ..database import Database
from ..utils.transforms import assign_ranks, title_case

_RANKED_USERS_SQL = """
    SELECT
        u.id,
        u.name,
        u.position,
        u.url_photo,
        COALESCE(SUM(s.score), 0) AS total_score,
        COUNT(DISTINCT s.id) AS activities_count
    FROM users u
    LEFT JOIN scores s ON u.id = s.user_id
    GROUP BY u.id, u.name, u.position, u.url_photo
    ORDER BY total_score DESC, u.id ASC
"""


def list_ranked_users(db: Database) -> list[dict]:
    """Every user with summed score and score-row count, ranked by total."""
    return assign_ranks(db.query(_RANKED_USERS_SQL))


def user_exists(db: Database, user_id: int) -> bool:
    return bool(db.query("SELECT id FROM users WHERE id = :user_id", {"user_id": user_id}))


def create_user(db: Database, name: str, position: str, url_photo: str) -> dict:
    """Insert a user with title-cased name/position.

    Returns {"user_id", "user": {"name", "position", "url_photo"}}.
    """
    name = title_case(name)
    position = title_case(position)
    result = db.query(
        "INSERT INTO users (name, position, url_photo) VALUES (:name, :position, :url_photo)",
        {"name": name, "position": position, "url_photo": url_photo},
    )
    return {
        "user_id": result.insert_id,
        "user": {"name": name, "position": position, "url_photo": url_photo},
    }
