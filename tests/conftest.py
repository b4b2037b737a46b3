"""
conftest.py — Shared Test Fixtures for the GBL API

Provides an in-memory SQLite Database handle, a FastAPI TestClient built
around it, and factory fixtures for users, scores and login credentials.

Business Rules:
- All tests run against an isolated in-memory DB (no MySQL needed)
- Each test function gets fresh tables (created, then dropped)
- The app is built with create_app(database=...) so the pool is injected

Called by: all test files via pytest autodiscovery
Depends on: gbl_api.models (Base), gbl_api.database, gbl_api.main
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from gbl_api.database import Database
from gbl_api.models import Base

TEST_DB_URL = "sqlite://"  # in-memory, one shared connection


@pytest.fixture()
def db() -> Database:
    """A Database handle on a fresh in-memory schema."""
    database = Database(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(database.engine, "connect")
    def _enable_fk(dbapi_conn, _):
        """SQLite ignores FKs by default — turn them on."""
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=database.engine)
    try:
        yield database
    finally:
        Base.metadata.drop_all(bind=database.engine)
        database.close()


@pytest.fixture()
def client(db: Database) -> TestClient:
    """TestClient around an app that uses the test database."""
    from gbl_api.main import create_app

    with TestClient(create_app(database=db)) as c:
        yield c


@pytest.fixture()
def make_user(db: Database):
    """Factory: insert a users row and return its id."""

    def _make(name="Test Angler", position="Captain", url_photo="http://photos/test.jpg"):
        result = db.query(
            "INSERT INTO users (name, position, url_photo) VALUES (:name, :position, :url_photo)",
            {"name": name, "position": position, "url_photo": url_photo},
        )
        return result.insert_id

    return _make


@pytest.fixture()
def make_score(db: Database):
    """Factory: insert a scores row for a user and return its id."""

    def _make(user_id, score):
        result = db.query(
            "INSERT INTO scores (user_id, score) VALUES (:user_id, :score)",
            {"user_id": user_id, "score": score},
        )
        return result.insert_id

    return _make


@pytest.fixture()
def test_login(db: Database) -> dict:
    """A credential row: alice / secret."""
    result = db.query(
        "INSERT INTO user_login (username, password) VALUES (:username, :password)",
        {"username": "alice", "password": "secret"},
    )
    return {"id": result.insert_id, "username": "alice", "password": "secret"}


@pytest.fixture()
def score_count(db: Database):
    """Number of scores rows stored for a user."""

    def _count(user_id):
        rows = db.query("SELECT COUNT(*) AS n FROM scores WHERE user_id = :user_id", {"user_id": user_id})
        return rows[0]["n"]

    return _count
