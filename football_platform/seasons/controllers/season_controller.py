import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.seasons.services.season_service import SeasonService

logger = logging.getLogger(__name__)

router = APIRouter()


class SeasonCreate(BaseModel):
    league_id: Optional[int] = None
    season_year: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


@router.get("")
def get_seasons(db: Session = Depends(get_db)):
    try:
        return [SeasonService.to_dict(season) for season in SeasonService(db).get_all_seasons()]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error fetching seasons: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", status_code=201)
def create_season(payload: SeasonCreate, db: Session = Depends(get_db)):
    if not payload.league_id or not payload.season_year or not payload.start_date or not payload.end_date:
        raise HTTPException(
            status_code=400,
            detail="league_id, season_year, start_date, and end_date are required",
        )
    try:
        season = SeasonService(db).create_season(
            payload.league_id, payload.season_year, payload.start_date, payload.end_date
        )
        return SeasonService.to_dict(season)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating season: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{season_id}")
def delete_season(season_id: int, db: Session = Depends(get_db)):
    try:
        SeasonService(db).delete_season(season_id)
        return {"message": "Season deleted"}
    except SQLAlchemyError as e:
        logger.error(f"❌ Error deleting season {season_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
