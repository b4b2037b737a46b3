"""Credential lookup against the user_login table.

Plain-text comparison on both columns; no hashing and no token issuance.
"""

from loguru import logger

from ..database import Database


def authenticate(db: Database, username: str, password: str) -> dict | None:
    """Return {"id", "username"} for a matching credential row, else None."""
    rows = db.query(
        "SELECT id, username FROM user_login WHERE username = :username AND password = :password",
        {"username": username, "password": password},
    )
    if not rows:
        logger.info("Login rejected for {}", username)
        return None
    row = rows[0]
    return {"id": row["id"], "username": row["username"]}
