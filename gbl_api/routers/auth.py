"""
routers/auth.py — Login Route

Checks a username/password pair against user_login and echoes the
matched record back. No session or token is created.

Business Rules:
- Both fields required (empty string counts as missing)
- Exact match on username AND password, compared as plain text
- Database failures surface as a static 500 message

Called by: main.py (router mount)
Depends on: services/auth_service.py, database
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from ..database import Database, get_db
from ..schemas.auth import LoginRequest, LoginResponse
from ..services.auth_service import authenticate

router = APIRouter(tags=["auth"])


@router.post("/auth/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Database = Depends(get_db)):
    if not body.username or not body.password:
        raise HTTPException(400, "Username and password are required")

    try:
        user = authenticate(db, body.username, body.password)
    except SQLAlchemyError:
        logger.exception("Login error")
        raise HTTPException(500, "Internal server error")

    if user is None:
        raise HTTPException(401, "Invalid credentials")
    return {"success": True, "user": user}
