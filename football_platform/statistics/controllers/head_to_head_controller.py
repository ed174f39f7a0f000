import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from football_platform.core.database import get_db
from football_platform.statistics.services.head_to_head_service import (
    HeadToHeadService,
    InvalidTeamPairError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_head_to_head(
    teamA: Optional[str] = None,
    teamB: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    Head-to-head record between two teams: win/draw counts, percentages and
    the five most recent meetings.
    """
    try:
        return HeadToHeadService(db).get_summary(teamA, teamB)
    except InvalidTeamPairError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error fetching head-to-head rows: {e}")
        raise HTTPException(status_code=500, detail=str(e))
