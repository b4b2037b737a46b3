"""
schemas/users.py — Pydantic models for roster endpoints

Called by: routers/users.py
Depends on: pydantic
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    name: str | None = None
    position: str | None = None
    url_photo: str | None = None


class RankedUser(BaseModel):
    id: int
    name: str
    position: str
    url_photo: str
    total_score: float = 0
    activities_count: int = 0
    rank: int


class CreatedUser(BaseModel):
    name: str
    position: str
    url_photo: str


class UserCreateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "User created successfully"
    user_id: int | None = Field(default=None, alias="userId")
    user: CreatedUser
