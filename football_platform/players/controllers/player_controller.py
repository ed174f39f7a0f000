import logging
from datetime import date
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.core.utils import to_int
from football_platform.players.services.player_service import PlayerService

logger = logging.getLogger(__name__)

router = APIRouter()


class PlayerCreate(BaseModel):
    player_name: Optional[str] = None
    default_position_id: Optional[int] = None
    position_id: Optional[int] = None  # legacy field name
    team_id: Optional[int] = None
    date_of_birth: Optional[date] = None
    nationality: Optional[str] = None
    height_cm: Optional[Union[str, int]] = None
    foot: Optional[str] = None
    season_id: Optional[int] = None

    @property
    def resolved_position_id(self) -> Optional[int]:
        # default_position_id wins over the legacy position_id
        return self.default_position_id or self.position_id


@router.get("")
def get_players(db: Session = Depends(get_db)):
    try:
        return [PlayerService.to_dict(p) for p in PlayerService(db).get_all_players()]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error fetching players: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", status_code=201)
def create_player(payload: PlayerCreate, db: Session = Depends(get_db)):
    position_id = payload.resolved_position_id
    if not payload.player_name or not position_id or not payload.team_id:
        raise HTTPException(
            status_code=400,
            detail="player_name, default_position_id (or position_id), and team_id are required",
        )
    player_data = {
        "player_name": payload.player_name,
        "default_position_id": position_id,
        "team_id": payload.team_id,
        "date_of_birth": payload.date_of_birth,
        "nationality": payload.nationality or None,
        "height_cm": to_int(payload.height_cm),
        "foot": payload.foot or None,
    }
    try:
        player = PlayerService(db).create_player(player_data, season_id=payload.season_id)
        return [PlayerService.to_dict(player)]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating player: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{player_id}")
def delete_player(player_id: int, db: Session = Depends(get_db)):
    try:
        PlayerService(db).delete_player(player_id)
        return {"message": "Player deleted"}
    except SQLAlchemyError as e:
        logger.error(f"❌ Error deleting player {player_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
