"""
schemas/auth.py — Pydantic models for the login endpoint

Business Rules:
- Both fields are optional here; presence is checked by the router
- No token in the response, only the matched credential record

Called by: routers/auth.py
Depends on: pydantic
"""

from __future__ import annotations

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginUser(BaseModel):
    id: int
    username: str


class LoginResponse(BaseModel):
    success: bool = True
    user: LoginUser
