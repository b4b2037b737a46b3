"""
routers/scores.py — Leaderboard Score Routes

Business Rules:
- userId must be present and non-zero; score must be present (0 is allowed)
- Unknown userId → 404 and nothing is written
- One scores row per user; repeated updates overwrite it in place

Called by: main.py (router mount)
Depends on: services/score_service.py, database
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from ..database import Database, get_db
from ..schemas.scores import ScoreRow, ScoreUpdate, ScoreUpdateResponse, WriteResultOut
from ..services.score_service import UserNotFoundError, list_scores, update_score

router = APIRouter(prefix="/api", tags=["scores"])


@router.get("/scores", response_model=list[ScoreRow])
def get_scores(db: Database = Depends(get_db)):
    try:
        return list_scores(db)
    except SQLAlchemyError:
        logger.exception("Error fetching scores")
        raise HTTPException(500, "Error fetching scores")


@router.post("/scores/update", response_model=ScoreUpdateResponse)
def post_score_update(body: ScoreUpdate, db: Database = Depends(get_db)):
    if not body.user_id or body.score is None:
        raise HTTPException(400, "userId and score are required")

    try:
        operation, result = update_score(db, body.user_id, body.score)
    except UserNotFoundError:
        raise HTTPException(404, "User not found")
    except SQLAlchemyError:
        logger.exception("Error updating score")
        raise HTTPException(500, "Error updating score")

    return ScoreUpdateResponse(
        data=WriteResultOut(insert_id=result.insert_id, affected_rows=result.affected_rows),
        operation=operation,
    )
