"""
Groups match participation rows into per-match entries.

A participation row is a plain dict with at least ``match_id`` and
``team_id``; rows usually also carry ``goals_scored``, ``team_name`` and the
parent match under ``match``. A match is only usable for aggregation once
exactly two sides have been recorded.
"""
from typing import Dict, Iterable, Iterator, Tuple

SIDES_PER_MATCH = 2


def group_by_match(rows: Iterable[dict]) -> Dict[int, dict]:
    """
    Group rows by match id, keeping first-seen match order and the arrival
    order of sides inside each match.

    Returns ``{match_id: {"match": <parent match of first row>, "sides": [row, ...]}}``.
    Rows without a match id are ignored.
    """
    grouped: Dict[int, dict] = {}
    for row in rows or ():
        match_id = row.get("match_id")
        if match_id is None:
            continue
        entry = grouped.get(match_id)
        if entry is None:
            entry = {"match": row.get("match"), "sides": []}
            grouped[match_id] = entry
        entry["sides"].append(row)
    return grouped


def is_complete(entry: dict) -> bool:
    return len(entry["sides"]) == SIDES_PER_MATCH


def completed_matches(rows: Iterable[dict]) -> Iterator[Tuple[int, dict]]:
    """Yield ``(match_id, entry)`` for every match with exactly two sides."""
    for match_id, entry in group_by_match(rows).items():
        if is_complete(entry):
            yield match_id, entry
