import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.core.utils import to_int
from football_platform.player_stats.services.player_stat_service import PlayerStatService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_recent_player_stats(db: Session = Depends(get_db)):
    try:
        stats = PlayerStatService(db).get_recent_stats()
        return [PlayerStatService.to_dict(stat, with_relations=True) for stat in stats]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error fetching player stats: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", status_code=201)
def create_player_stat(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    """Store one player's stat line; counters arrive as loosely typed form values."""
    if not to_int(payload.get("match_id")) or not to_int(payload.get("player_id")):
        raise HTTPException(status_code=400, detail="match_id and player_id are required")
    try:
        stat = PlayerStatService(db).create_player_stat(payload)
        return PlayerStatService.to_dict(stat)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating player stat: {e}")
        raise HTTPException(status_code=500, detail=str(e))
