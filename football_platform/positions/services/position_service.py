import logging
from sqlalchemy.orm import Session
from football_platform.positions.models.position_model import Position

logger = logging.getLogger(__name__)

# (position_name, position_category)
DEFAULT_POSITIONS = [
    ("Goalkeeper", "Goalkeeper"), ("GK", "Goalkeeper"),
    ("Defender", "Defender"), ("CB", "Defender"), ("LB", "Defender"), ("RB", "Defender"),
    ("LWB", "Defender"), ("RWB", "Defender"),
    ("Midfielder", "Midfielder"), ("CDM", "Midfielder"), ("CM", "Midfielder"), ("CAM", "Midfielder"),
    ("LM", "Midfielder"), ("RM", "Midfielder"),
    ("Forward", "Forward"), ("LW", "Forward"), ("RW", "Forward"), ("CF", "Forward"), ("ST", "Forward"),
]


class PositionService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_positions(self):
        return self.db.query(Position).order_by(Position.position_id).all()

    def seed_positions(self, positions=DEFAULT_POSITIONS) -> int:
        """Insert the positions whose names are not stored yet. Returns how many were added."""
        existing = {name for (name,) in self.db.query(Position.position_name).all()}
        to_insert = [
            Position(position_name=name, position_category=category)
            for name, category in positions
            if name not in existing
        ]
        if not to_insert:
            logger.info("No new positions to insert.")
            return 0

        try:
            self.db.add_all(to_insert)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info(f"✅ Successfully added {len(to_insert)} positions.")
        return len(to_insert)

    @staticmethod
    def to_dict(position: Position) -> dict:
        return {
            "position_id": position.position_id,
            "position_name": position.position_name,
            "position_category": position.position_category,
        }
