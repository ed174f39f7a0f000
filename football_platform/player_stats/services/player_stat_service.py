from sqlalchemy.orm import Session, joinedload

from football_platform.core.utils import to_int, to_number
from football_platform.player_stats.models.player_stat_model import PlayerStat

RECENT_LIMIT = 100


class PlayerStatService:
    def __init__(self, db: Session):
        self.db = db

    def get_recent_stats(self, limit: int = RECENT_LIMIT):
        """Latest recorded stat lines, newest first."""
        return (
            self.db.query(PlayerStat)
            .options(joinedload(PlayerStat.match), joinedload(PlayerStat.player))
            .order_by(PlayerStat.created_at.desc(), PlayerStat.stat_id.desc())
            .limit(limit)
            .all()
        )

    def create_player_stat(self, stat_data: dict) -> PlayerStat:
        """Insert one player's stat line for a match. Blank or non-numeric counters are stored as NULL."""
        values = {
            "match_id": to_int(stat_data.get("match_id")),
            "player_id": to_int(stat_data.get("player_id")),
        }
        for field in PlayerStat.COUNTER_FIELDS:
            values[field] = to_int(stat_data.get(field))
        for field in PlayerStat.DECIMAL_FIELDS:
            values[field] = to_number(stat_data.get(field))

        stat = PlayerStat(**values)
        try:
            self.db.add(stat)
            self.db.commit()
            self.db.refresh(stat)
        except Exception:
            self.db.rollback()
            raise
        return stat

    @staticmethod
    def to_dict(stat: PlayerStat, with_relations: bool = False) -> dict:
        data = {
            "stat_id": stat.stat_id,
            "match_id": stat.match_id,
            "player_id": stat.player_id,
        }
        for field in PlayerStat.COUNTER_FIELDS + PlayerStat.DECIMAL_FIELDS:
            data[field] = getattr(stat, field)
        data["created_at"] = stat.created_at.isoformat() if stat.created_at else None

        if with_relations:
            match_date = stat.match.match_date if stat.match else None
            data["matches"] = {"match_date": match_date.isoformat() if match_date else None}
            data["players"] = {"player_name": stat.player.player_name if stat.player else None}
        return data
