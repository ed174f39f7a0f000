import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.leagues.services.league_service import LeagueService
from football_platform.statistics.services.league_stats_service import LeagueStatsService

logger = logging.getLogger(__name__)

router = APIRouter()


class LeagueCreate(BaseModel):
    league_name: Optional[str] = None
    country: Optional[str] = None


@router.get("")
def get_leagues(db: Session = Depends(get_db)):
    try:
        leagues = LeagueService(db).get_all_leagues()
        return [LeagueService.to_dict(league) for league in leagues]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error fetching leagues: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", status_code=201)
def create_league(payload: LeagueCreate, db: Session = Depends(get_db)):
    if not payload.league_name or not payload.country:
        raise HTTPException(status_code=400, detail="Please provide league_name and country")
    try:
        league = LeagueService(db).create_league(payload.league_name, payload.country)
        return [LeagueService.to_dict(league)]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating league: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{league_id}")
def delete_league(league_id: int, db: Session = Depends(get_db)):
    try:
        LeagueService(db).delete_league(league_id)
        return {"message": "League deleted"}
    except SQLAlchemyError as e:
        logger.error(f"❌ Error deleting league {league_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ---------------------------------------------
# All-time league statistics
# ---------------------------------------------
@router.get("/{league_id}/top-scorers")
def get_top_scorers(league_id: int, db: Session = Depends(get_db)):
    """Ten players with the most goals across every season of the league."""
    try:
        return LeagueStatsService(db).top_scorers(league_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error computing top scorers for league {league_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{league_id}/top-assists")
def get_top_assists(league_id: int, db: Session = Depends(get_db)):
    """Ten players with the most assists across every season of the league."""
    try:
        return LeagueStatsService(db).top_assists(league_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error computing top assists for league {league_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{league_id}/table")
def get_league_table(league_id: int, db: Session = Depends(get_db)):
    """Points table built from every completed match of the league."""
    try:
        return LeagueStatsService(db).league_table(league_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error computing table for league {league_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
