import logging
import math
from datetime import date, datetime, time
from typing import Any, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from football_platform.core.utils import count_or_zero, iso_or_none, to_int
from football_platform.matches.models.match_model import MatchTeam
from football_platform.statistics.services.match_pairing_service import completed_matches

logger = logging.getLogger(__name__)

RECENT_MATCHES_LIMIT = 5
INVALID_PAIR_MESSAGE = "teamA and teamB must be different valid team IDs"
EPOCH = datetime(1970, 1, 1)


class InvalidTeamPairError(ValueError):
    """Raised when a head-to-head request does not name two distinct teams."""

    def __init__(self, message: str = INVALID_PAIR_MESSAGE):
        super().__init__(message)
        self.message = message


def validate_team_pair(team_a: Any, team_b: Any) -> Tuple[int, int]:
    """Return both ids as ints, or raise InvalidTeamPairError."""
    parsed_a = to_int(team_a)
    parsed_b = to_int(team_b)
    # 0 is never a valid identifier
    if not parsed_a or not parsed_b or parsed_a == parsed_b:
        raise InvalidTeamPairError()
    return parsed_a, parsed_b


def _date_sort_key(value: Any) -> datetime:
    """Missing or unparseable dates sort as the oldest possible meeting."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip()).replace(tzinfo=None)
        except ValueError:
            return EPOCH
    return EPOCH


def _to_pct(count: int, total: int) -> int:
    if not total:
        return 0
    # halves round up
    return int(math.floor(count / total * 100 + 0.5))


def _find_side(sides: List[dict], team_id: int) -> Optional[dict]:
    for side in sides:
        if to_int(side.get("team_id")) == team_id:
            return side
    return None


def summarize_head_to_head(team_a: Any, team_b: Any, rows: Iterable[dict]) -> dict:
    """
    Win/loss/draw record between two teams across their completed meetings.

    ``rows`` are participation rows for both teams (any match either team
    played); only complete matches where both teams appear are counted.
    Outcomes are recomputed from goals; stored result tags are ignored.
    """
    team_a, team_b = validate_team_pair(team_a, team_b)

    meetings = []
    for match_id, entry in completed_matches(rows):
        side_a = _find_side(entry["sides"], team_a)
        side_b = _find_side(entry["sides"], team_b)
        if side_a is None or side_b is None:
            continue
        match = entry["match"] or {}
        meetings.append({
            "match_id": match_id,
            "match_date": iso_or_none(match.get("match_date")),
            "match_time": iso_or_none(match.get("match_time")),
            "venue": match.get("venue") or None,
            "teamA_goals": count_or_zero(side_a.get("goals_scored")),
            "teamB_goals": count_or_zero(side_b.get("goals_scored")),
        })

    # sorted() is stable, so meetings on the same date keep arrival order
    meetings = sorted(meetings, key=lambda m: _date_sort_key(m["match_date"]), reverse=True)

    team_a_wins = team_b_wins = draws = 0
    for meeting in meetings:
        if meeting["teamA_goals"] > meeting["teamB_goals"]:
            team_a_wins += 1
        elif meeting["teamA_goals"] < meeting["teamB_goals"]:
            team_b_wins += 1
        else:
            draws += 1

    total = len(meetings)
    return {
        "teamA": team_a,
        "teamB": team_b,
        "totalMatches": total,
        "teamAWins": team_a_wins,
        "teamBWins": team_b_wins,
        "draws": draws,
        "teamAWinPct": _to_pct(team_a_wins, total),
        "teamBWinPct": _to_pct(team_b_wins, total),
        "drawPct": _to_pct(draws, total),
        "recentMatches": meetings[:RECENT_MATCHES_LIMIT],
    }


def participation_row(row: MatchTeam) -> dict:
    """Flatten a MatchTeam ORM row into the plain record the aggregators read."""
    match = row.match
    return {
        "match_id": row.match_id,
        "team_id": row.team_id,
        "team_name": row.team.team_name if row.team else None,
        "goals_scored": row.goals_scored,
        "match": {
            "match_date": match.match_date,
            "match_time": match.match_time,
            "venue": match.venue,
        } if match else None,
    }


class HeadToHeadService:
    def __init__(self, db: Session):
        self.db = db

    def fetch_rows(self, team_a: int, team_b: int) -> List[dict]:
        """Every participation row of either team, with its parent match."""
        rows = (
            self.db.query(MatchTeam)
            .options(joinedload(MatchTeam.match), joinedload(MatchTeam.team))
            .filter(MatchTeam.team_id.in_([team_a, team_b]))
            .order_by(MatchTeam.match_id)
            .all()
        )
        return [participation_row(row) for row in rows]

    def get_summary(self, team_a: Any, team_b: Any) -> dict:
        team_a, team_b = validate_team_pair(team_a, team_b)
        rows = self.fetch_rows(team_a, team_b)
        logger.debug(f"Head-to-head {team_a} vs {team_b}: {len(rows)} participation rows")
        return summarize_head_to_head(team_a, team_b, rows)
