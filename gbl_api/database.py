"""Database handle — a pooled SQLAlchemy engine behind a single query() call.

Each statement runs on its own pooled connection inside its own
transaction, so every write is committed independently. Driver errors are
logged and re-raised unchanged; nothing here retries.

The handle is created once per process by the app lifespan (or injected by
tests), kept on app.state.db, and disposed on shutdown.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Request
from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings


@dataclass(frozen=True)
class WriteResult:
    """Outcome of a statement that returns no rows."""

    insert_id: int | None
    affected_rows: int


class Database:
    def __init__(self, url: str, **engine_kwargs: Any):
        self.engine = create_engine(url, **engine_kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.sqlalchemy_url
        connect_args = {}
        if not url.startswith("sqlite"):
            connect_args["connect_timeout"] = settings.db_connect_timeout
        return cls(
            url,
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=connect_args,
        )

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def query(self, sql: str, params: dict[str, Any] | None = None) -> list[dict] | WriteResult:
        """Execute one parameterized statement.

        Returns a list of row dicts for statements that produce rows,
        otherwise a WriteResult with the generated id and affected row count.
        """
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(sql), params or {})
                if result.returns_rows:
                    return [dict(row._mapping) for row in result]
                return WriteResult(insert_id=result.lastrowid, affected_rows=result.rowcount)
        except SQLAlchemyError as e:
            logger.error("Database query error: {}", e)
            raise

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database pool closed")


def get_db(request: Request) -> Database:
    return request.app.state.db
