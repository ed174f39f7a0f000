import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.core.utils import to_int
from football_platform.teams.services.team_service import TeamService

logger = logging.getLogger(__name__)

router = APIRouter()


class TeamCreate(BaseModel):
    league_id: Optional[int] = None
    team_name: Optional[str] = None
    city: Optional[str] = None
    stadium: Optional[str] = None
    founded_year: Optional[Union[str, int]] = None


@router.get("")
def get_teams(db: Session = Depends(get_db)):
    try:
        return [TeamService.to_dict(team) for team in TeamService(db).get_all_teams()]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error fetching teams: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", status_code=201)
def create_team(payload: TeamCreate, db: Session = Depends(get_db)):
    if not payload.league_id or not payload.team_name:
        raise HTTPException(status_code=400, detail="league_id and team_name are required")
    try:
        team = TeamService(db).create_team(
            league_id=payload.league_id,
            team_name=payload.team_name,
            city=payload.city or None,
            stadium=payload.stadium or None,
            founded_year=to_int(payload.founded_year),
        )
        return [TeamService.to_dict(team)]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating team: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{team_id}")
def delete_team(team_id: int, db: Session = Depends(get_db)):
    try:
        TeamService(db).delete_team(team_id)
        return {"message": "Team deleted"}
    except SQLAlchemyError as e:
        logger.error(f"❌ Error deleting team {team_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
