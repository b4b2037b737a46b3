"""Roster API — ranked user list and user creation."""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from ..database import Database, get_db
from ..schemas.users import RankedUser, UserCreate, UserCreateResponse
from ..services.user_service import create_user, list_ranked_users

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users", response_model=list[RankedUser])
def list_users(db: Database = Depends(get_db)):
    try:
        return list_ranked_users(db)
    except SQLAlchemyError:
        logger.exception("Error fetching users")
        raise HTTPException(500, "Error fetching users")


@router.post("/users", response_model=UserCreateResponse, status_code=201)
def add_user(body: UserCreate, db: Database = Depends(get_db)):
    if not body.name or not body.position or not body.url_photo:
        raise HTTPException(400, "Name, position, and url_photo are required")

    try:
        created = create_user(db, body.name, body.position, body.url_photo)
    except SQLAlchemyError:
        logger.exception("Error creating user")
        raise HTTPException(500, "Error creating user")

    logger.info("Created user {} ({})", created["user_id"], created["user"]["name"])
    return UserCreateResponse(user_id=created["user_id"], user=created["user"])
