from typing import Optional
from sqlalchemy.orm import Session, joinedload
from football_platform.teams.models.team_model import Team


class TeamService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_teams(self):
        """All teams with their league eagerly loaded."""
        return (
            self.db.query(Team)
            .options(joinedload(Team.league))
            .order_by(Team.team_id)
            .all()
        )

    def create_team(
        self,
        league_id: int,
        team_name: str,
        city: Optional[str] = None,
        stadium: Optional[str] = None,
        founded_year: Optional[int] = None,
    ):
        team = Team(
            league_id=league_id,
            team_name=team_name,
            city=city,
            stadium=stadium,
            founded_year=founded_year,
        )
        try:
            self.db.add(team)
            self.db.commit()
            self.db.refresh(team)
        except Exception:
            self.db.rollback()
            raise
        return team

    def delete_team(self, team_id: int):
        try:
            self.db.query(Team).filter(Team.team_id == team_id).delete()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def to_dict(team: Team) -> dict:
        return {
            "team_id": team.team_id,
            "league_id": team.league_id,
            "team_name": team.team_name,
            "city": team.city,
            "stadium": team.stadium,
            "founded_year": team.founded_year,
            "leagues": {"league_name": team.league.league_name} if team.league else None,
        }
