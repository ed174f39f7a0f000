from fastapi import APIRouter
from football_platform.leagues.controllers.league_controller import router as leagues_router
from football_platform.teams.controllers.team_controller import router as teams_router
from football_platform.players.controllers.player_controller import router as players_router
from football_platform.positions.controllers.position_controller import router as positions_router
from football_platform.statistics.controllers.head_to_head_controller import router as head_to_head_router
from football_platform.seasons.controllers.season_controller import router as seasons_router
from football_platform.matches.controllers.match_controller import router as matches_router
from football_platform.player_stats.controllers.player_stat_controller import router as player_stats_router

api_router = APIRouter(prefix="/api")

api_router.include_router(leagues_router, prefix="/leagues", tags=["leagues"])
api_router.include_router(teams_router, prefix="/teams", tags=["teams"])
api_router.include_router(players_router, prefix="/players", tags=["players"])
api_router.include_router(positions_router, prefix="/positions", tags=["positions"])
api_router.include_router(head_to_head_router, prefix="/head-to-head", tags=["head-to-head"])
api_router.include_router(seasons_router, prefix="/seasons", tags=["seasons"])
api_router.include_router(matches_router, prefix="/matches", tags=["matches"])
api_router.include_router(player_stats_router, prefix="/player-stats", tags=["player-stats"])
