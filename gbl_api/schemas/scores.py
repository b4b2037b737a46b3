"""
schemas/scores.py — Pydantic models for leaderboard score endpoints

Business Rules:
- userId arrives camelCased from clients and is exposed as user_id
- score may be 0; only a missing/null score is rejected (by the router)

Called by: routers/scores.py
Depends on: pydantic
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScoreUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int | None = Field(default=None, alias="userId")
    score: float | None = None


class ScoreRow(BaseModel):
    score_id: int
    score: float
    user_id: int
    user_name: str
    user_position: str
    user_photo: str


class WriteResultOut(BaseModel):
    insert_id: int | None = None
    affected_rows: int = 0


class ScoreUpdateResponse(BaseModel):
    message: str = "Score updated successfully"
    data: WriteResultOut
    operation: Literal["insert", "update"]
