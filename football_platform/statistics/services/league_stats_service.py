import logging
from typing import List

from sqlalchemy.orm import Session, joinedload

from football_platform.matches.models.match_model import Match, MatchTeam
from football_platform.player_stats.models.player_stat_model import PlayerStat
from football_platform.seasons.models.seasons_model import Season
from football_platform.statistics.services.head_to_head_service import participation_row
from football_platform.statistics.services.league_table_service import build_league_table
from football_platform.statistics.services.leaderboard_service import build_leaderboard
from football_platform.statistics.services.match_pairing_service import completed_matches

logger = logging.getLogger(__name__)


class LeagueStatsService:
    """All-time statistics for one league, recomputed from raw rows on every call."""

    def __init__(self, db: Session):
        self.db = db

    def get_match_ids(self, league_id: int) -> List[int]:
        """Seasons of the league, then the matches of those seasons."""
        season_ids = [
            season_id for (season_id,) in
            self.db.query(Season.season_id).filter(Season.league_id == league_id).all()
        ]
        if not season_ids:
            return []

        return [
            match_id for (match_id,) in
            self.db.query(Match.match_id).filter(Match.season_id.in_(season_ids)).all()
        ]

    def get_participation_rows(self, match_ids: List[int]) -> List[dict]:
        if not match_ids:
            return []
        rows = (
            self.db.query(MatchTeam)
            .options(joinedload(MatchTeam.match), joinedload(MatchTeam.team))
            .filter(MatchTeam.match_id.in_(match_ids))
            .order_by(MatchTeam.match_id)
            .all()
        )
        return [participation_row(row) for row in rows]

    def get_player_stat_rows(self, match_ids: List[int]) -> List[dict]:
        if not match_ids:
            return []
        rows = (
            self.db.query(PlayerStat)
            .options(joinedload(PlayerStat.player))
            .filter(PlayerStat.match_id.in_(match_ids))
            .order_by(PlayerStat.stat_id)
            .all()
        )
        return [
            {
                "match_id": row.match_id,
                "player_id": row.player_id,
                "player_name": row.player.player_name if row.player else None,
                "goals": row.goals,
                "assists": row.assists,
            }
            for row in rows
        ]

    def league_table(self, league_id: int) -> List[dict]:
        match_ids = self.get_match_ids(league_id)
        rows = self.get_participation_rows(match_ids)
        table = build_league_table(rows)
        logger.info(f"League {league_id} table: {len(table)} teams from {len(match_ids)} matches")
        return table

    def top_scorers(self, league_id: int) -> List[dict]:
        return self._leaderboard(league_id, "goals")

    def top_assists(self, league_id: int) -> List[dict]:
        return self._leaderboard(league_id, "assists")

    def _leaderboard(self, league_id: int, metric: str) -> List[dict]:
        match_ids = self.get_match_ids(league_id)
        if not match_ids:
            return []

        # Incomplete matches do not count towards any leaderboard
        completed_ids = {
            match_id for match_id, _ in completed_matches(self.get_participation_rows(match_ids))
        }
        if not completed_ids:
            return []

        stat_rows = self.get_player_stat_rows(sorted(completed_ids))
        return build_leaderboard(stat_rows, metric, match_ids=completed_ids)
