import logging
from datetime import date, time
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.matches.services.match_service import MatchService

logger = logging.getLogger(__name__)

router = APIRouter()

Numeric = Optional[Union[int, float, str]]


class MatchCreate(BaseModel):
    season_id: Optional[int] = None
    match_date: Optional[date] = None
    match_time: Optional[time] = None
    venue: Optional[str] = None
    teamA_id: Optional[int] = None
    teamB_id: Optional[int] = None
    teamA_goals: Numeric = None
    teamB_goals: Numeric = None
    teamA_role: Optional[str] = None
    teamB_role: Optional[str] = None
    teamA_possession: Numeric = None
    teamB_possession: Numeric = None


@router.post("", status_code=201)
def record_match(payload: MatchCreate, db: Session = Depends(get_db)):
    """Record a match result together with both of its team rows."""
    if not payload.season_id or not payload.match_date or not payload.teamA_id or not payload.teamB_id:
        raise HTTPException(
            status_code=400,
            detail="season_id, match_date, teamA_id, and teamB_id are required",
        )
    if payload.teamA_id == payload.teamB_id:
        raise HTTPException(status_code=400, detail="teamA_id and teamB_id must be different")

    try:
        match = MatchService(db).record_match(payload.model_dump())
        return {"match_id": match.match_id}
    except SQLAlchemyError as e:
        logger.error(f"❌ Error recording match: {e}")
        raise HTTPException(status_code=500, detail=str(e))
