"""Seed the canonical playing positions: ``python -m football_platform.positions.seed``."""
import logging

from football_platform.core.database import SessionLocal, init_db
from football_platform.positions.services.position_service import PositionService

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        logger.info("Seeding positions...")
        PositionService(db).seed_positions()
    except Exception as e:
        logger.error(f"❌ Error seeding positions: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
