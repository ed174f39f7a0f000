import logging
from typing import Optional

from sqlalchemy.orm import Session

from football_platform.core.utils import count_or_zero, to_number
from football_platform.matches.models.match_model import Match, MatchTeam

logger = logging.getLogger(__name__)

HOME = "home"
AWAY = "away"


def get_result(goals_for: int, goals_against: int) -> str:
    if goals_for > goals_against:
        return "win"
    if goals_for < goals_against:
        return "loss"
    return "draw"


def normalize_role(role: Optional[str], fallback: str) -> str:
    if role is None or not str(role).strip():
        return fallback
    return str(role).strip().lower()


class MatchService:
    def __init__(self, db: Session):
        self.db = db

    def record_match(self, match_data: dict) -> Match:
        """
        Create a match and the two team rows that make it complete.

        Goals fall back to 0, roles default to home/away and each side's
        result tag is derived from the score.
        """
        goals_a = count_or_zero(match_data.get("teamA_goals"))
        goals_b = count_or_zero(match_data.get("teamB_goals"))

        match = Match(
            season_id=match_data["season_id"],
            match_date=match_data["match_date"],
            match_time=match_data.get("match_time"),
            venue=match_data.get("venue") or None,
        )
        try:
            self.db.add(match)
            self.db.flush()  # assigns match_id

            self.db.add_all([
                MatchTeam(
                    match_id=match.match_id,
                    team_id=match_data["teamA_id"],
                    team_role=normalize_role(match_data.get("teamA_role"), HOME),
                    goals_scored=goals_a,
                    possession_percentage=to_number(match_data.get("teamA_possession")),
                    result=get_result(goals_a, goals_b),
                ),
                MatchTeam(
                    match_id=match.match_id,
                    team_id=match_data["teamB_id"],
                    team_role=normalize_role(match_data.get("teamB_role"), AWAY),
                    goals_scored=goals_b,
                    possession_percentage=to_number(match_data.get("teamB_possession")),
                    result=get_result(goals_b, goals_a),
                ),
            ])
            self.db.commit()
            self.db.refresh(match)
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Recorded match {match.match_id}: {match_data['teamA_id']} {goals_a}-{goals_b} {match_data['teamB_id']}")
        return match
