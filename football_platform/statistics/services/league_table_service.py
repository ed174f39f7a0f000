import logging
from typing import Dict, Iterable, List

from football_platform.core.utils import count_or_zero, to_int
from football_platform.statistics.services.match_pairing_service import completed_matches

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1


def _empty_row(team_id: int, team_name) -> dict:
    return {
        "team_id": team_id,
        "team_name": team_name or UNKNOWN_NAME,
        "played": 0,
        "wins": 0,
        "draws": 0,
        "losses": 0,
        "goals_for": 0,
        "goals_against": 0,
        "goal_diff": 0,
        "points": 0,
    }


def standings_sort_key(row: dict):
    # points, goal difference, goals scored; team id keeps equal rows deterministic
    return (-row["points"], -row["goal_diff"], -row["goals_for"], row["team_id"])


def build_league_table(rows: Iterable[dict]) -> List[dict]:
    """
    All-time standings from the participation rows of a league's matches.

    Only complete matches count. A match with a side that has no team id is
    skipped on its own; the rest of the table is still built.
    """
    table: Dict[int, dict] = {}

    for match_id, entry in completed_matches(rows):
        a, b = entry["sides"]
        team_a, team_b = to_int(a.get("team_id")), to_int(b.get("team_id"))
        if team_a is None or team_b is None or team_a == team_b:
            logger.debug(f"Skipping match {match_id}: malformed team reference")
            continue

        row_a = table.get(team_a)
        if row_a is None:
            row_a = table[team_a] = _empty_row(team_a, a.get("team_name"))
        row_b = table.get(team_b)
        if row_b is None:
            row_b = table[team_b] = _empty_row(team_b, b.get("team_name"))

        goals_a = count_or_zero(a.get("goals_scored"))
        goals_b = count_or_zero(b.get("goals_scored"))

        row_a["played"] += 1
        row_b["played"] += 1
        row_a["goals_for"] += goals_a
        row_a["goals_against"] += goals_b
        row_b["goals_for"] += goals_b
        row_b["goals_against"] += goals_a

        if goals_a > goals_b:
            row_a["wins"] += 1
            row_a["points"] += POINTS_FOR_WIN
            row_b["losses"] += 1
        elif goals_a < goals_b:
            row_b["wins"] += 1
            row_b["points"] += POINTS_FOR_WIN
            row_a["losses"] += 1
        else:
            row_a["draws"] += 1
            row_b["draws"] += 1
            row_a["points"] += POINTS_FOR_DRAW
            row_b["points"] += POINTS_FOR_DRAW

    for row in table.values():
        row["goal_diff"] = row["goals_for"] - row["goals_against"]

    return sorted(table.values(), key=standings_sort_key)
