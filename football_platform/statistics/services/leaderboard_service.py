from typing import Collection, Dict, Iterable, List, Optional

from football_platform.core.utils import count_or_zero, to_int

UNKNOWN_NAME = "Unknown"
LEADERBOARD_SIZE = 10
SUPPORTED_METRICS = ("goals", "assists")


def build_leaderboard(
    stat_rows: Iterable[dict],
    metric: str,
    match_ids: Optional[Collection[int]] = None,
    limit: int = LEADERBOARD_SIZE,
) -> List[dict]:
    """
    Rank players by the sum of one per-match counter.

    :param stat_rows: player stat records (``match_id``, ``player_id``,
        ``player_name`` and the counter columns)
    :param metric: ``"goals"`` or ``"assists"``
    :param match_ids: when given, only rows from these matches are counted
    :param limit: number of players returned
    :return: ``[{"player_id", "player_name", "total_<metric>"}]``, best first
    """
    if metric not in SUPPORTED_METRICS:
        raise ValueError(f"Unsupported leaderboard metric: {metric}")

    total_key = f"total_{metric}"
    allowed = set(match_ids) if match_ids is not None else None
    totals: Dict[int, dict] = {}

    for row in stat_rows or ():
        if allowed is not None and row.get("match_id") not in allowed:
            continue
        player_id = to_int(row.get("player_id"))
        if player_id is None:
            continue
        entry = totals.get(player_id)
        if entry is None:
            entry = totals[player_id] = {
                "player_id": player_id,
                "player_name": row.get("player_name") or UNKNOWN_NAME,
                total_key: 0,
            }
        entry[total_key] += count_or_zero(row.get(metric))

    ranked = sorted(totals.values(), key=lambda e: (-e[total_key], e["player_id"]))
    return ranked[:limit]
