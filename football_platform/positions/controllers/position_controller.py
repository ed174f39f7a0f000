import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from football_platform.core.database import get_db
from football_platform.positions.services.position_service import PositionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_positions(db: Session = Depends(get_db)):
    try:
        return [PositionService.to_dict(p) for p in PositionService(db).get_all_positions()]
    except SQLAlchemyError as e:
        logger.error(f"❌ Error fetching positions: {e}")
        raise HTTPException(status_code=500, detail=str(e))
