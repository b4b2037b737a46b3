"""
test_score_service.py — Tests for gbl_api/services/score_service.py

Focus: the one-row-per-user invariant. Verifies the upsert statement per
dialect, that racing writers cannot create a second row, and that the
unique key rejects a plain duplicate insert.

Called by: pytest
Depends on: gbl_api/services/score_service.py, conftest.py
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from gbl_api.database import Database
from gbl_api.models import Base
from gbl_api.services import score_service

from gbl_api.services.score_service import (
    UserNotFoundError,
    has_score,
    list_scores,
    update_score,
    upsert_score_sql,
)


def test_upsert_sql_mysql_uses_row_alias():
    sql = upsert_score_sql("mysql")
    assert "VALUES (:user_id, :score) AS new" in sql
    assert "ON DUPLICATE KEY UPDATE score = new.score" in sql
    assert "VALUES(score)" not in sql


@pytest.mark.parametrize("dialect", ["sqlite", "postgresql"])
def test_upsert_sql_conflict_clause(dialect):
    sql = upsert_score_sql(dialect)
    assert "ON CONFLICT (user_id) DO UPDATE" in sql


def test_update_score_insert_then_update(db, make_user):
    user_id = make_user()
    op1, _ = update_score(db, user_id, 10)
    op2, result = update_score(db, user_id, 25)
    assert (op1, op2) == ("insert", "update")
    assert result.affected_rows == 1
    assert list_scores(db)[0]["score"] == 25


def test_update_score_unknown_user_writes_nothing(db):
    with pytest.raises(UserNotFoundError):
        update_score(db, 12345, 10)
    assert db.query("SELECT id FROM scores") == []


def test_racing_first_writes_leave_one_row(db, make_user, score_count):
    """Both writers saw "no score yet"; the upsert still keeps a single row."""
    user_id = make_user()
    with patch("gbl_api.services.score_service.has_score", return_value=False):
        op1, _ = update_score(db, user_id, 10)
        op2, _ = update_score(db, user_id, 20)

    assert (op1, op2) == ("insert", "insert")
    assert score_count(user_id) == 1
    assert list_scores(db)[0]["score"] == 20


def test_duplicate_score_row_rejected_by_unique_key(db, make_user, make_score):
    user_id = make_user()
    make_score(user_id, 1)
    with pytest.raises(IntegrityError):
        make_score(user_id, 2)


def test_has_score(db, make_user, make_score):
    user_id = make_user()
    assert has_score(db, user_id) is False
    make_score(user_id, 7)
    assert has_score(db, user_id) is True


@pytest.fixture()
def file_db(tmp_path):
    """A file-backed SQLite Database with a real multi-connection pool."""
    database = Database(
        f"sqlite:///{tmp_path / 'race.db'}",
        connect_args={"check_same_thread": False, "timeout": 10},
        pool_size=4,
    )
    Base.metadata.create_all(bind=database.engine)
    try:
        yield database
    finally:
        database.close()


def test_simultaneous_first_writes_leave_one_row(file_db):
    """Two threads both read "no score yet" before either writes."""
    user_id = file_db.query(
        "INSERT INTO users (name, position, url_photo) VALUES ('Racer', 'Crew', 'http://r')"
    ).insert_id
    both_checked = threading.Barrier(2, timeout=10)
    real_has_score = score_service.has_score

    def _has_score_then_wait(db, uid):
        seen = real_has_score(db, uid)
        both_checked.wait()
        return seen

    with patch("gbl_api.services.score_service.has_score", side_effect=_has_score_then_wait):
        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [pool.submit(update_score, file_db, user_id, s) for s in (10, 20)]
            operations = [f.result()[0] for f in futures]

    assert operations == ["insert", "insert"]
    rows = file_db.query("SELECT score FROM scores WHERE user_id = :u", {"u": user_id})
    assert len(rows) == 1
    assert rows[0]["score"] in (10, 20)
