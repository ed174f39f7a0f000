from sqlalchemy.orm import Session
from football_platform.leagues.models.leagues_models import League


class LeagueService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_leagues(self):
        return self.db.query(League).order_by(League.league_id).all()

    def create_league(self, league_name: str, country: str):
        '''Insert a league and return it with its generated id.'''
        league = League(league_name=league_name, country=country)
        try:
            self.db.add(league)
            self.db.commit()
            self.db.refresh(league)
        except Exception:
            self.db.rollback()
            raise
        return league

    def delete_league(self, league_id: int):
        """Delete by id. Seasons, teams and matches of the league are left in place."""
        try:
            self.db.query(League).filter(League.league_id == league_id).delete()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def to_dict(league: League) -> dict:
        return {
            "league_id": league.league_id,
            "league_name": league.league_name,
            "country": league.country,
        }
