import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from football_platform.players.models.player_model import Player, TeamRoster

logger = logging.getLogger(__name__)

ACTIVE_CONTRACT = "Active"


class PlayerService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_players(self):
        return (
            self.db.query(Player)
            .options(joinedload(Player.position))
            .order_by(Player.player_id)
            .all()
        )

    def create_player(self, player_data: dict, season_id: Optional[int] = None):
        """
        Insert a player. When a season is given the player is also put on the
        team's roster for that season, joining today with an active contract.
        Both rows are written in one transaction.
        """
        player = Player(
            player_name=player_data["player_name"],
            default_position_id=player_data["default_position_id"],
            team_id=player_data["team_id"],
            date_of_birth=player_data.get("date_of_birth"),
            nationality=player_data.get("nationality"),
            height_cm=player_data.get("height_cm"),
            foot=player_data.get("foot"),
        )
        try:
            self.db.add(player)
            self.db.flush()  # assigns player_id

            if season_id:
                self.db.add(TeamRoster(
                    team_id=player.team_id,
                    player_id=player.player_id,
                    season_id=season_id,
                    join_date=date.today(),
                    contract_status=ACTIVE_CONTRACT,
                ))
                logger.info(f"Player {player.player_id} added to roster of team {player.team_id} for season {season_id}")

            self.db.commit()
            self.db.refresh(player)
        except Exception:
            self.db.rollback()
            raise
        return player

    def delete_player(self, player_id: int):
        try:
            self.db.query(Player).filter(Player.player_id == player_id).delete()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def to_dict(player: Player) -> dict:
        return {
            "player_id": player.player_id,
            "player_name": player.player_name,
            "default_position_id": player.default_position_id,
            "team_id": player.team_id,
            "date_of_birth": player.date_of_birth.isoformat() if player.date_of_birth else None,
            "nationality": player.nationality,
            "height_cm": player.height_cm,
            "foot": player.foot,
            "positions": {"position_name": player.position.position_name} if player.position else None,
        }
