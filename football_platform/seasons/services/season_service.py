from datetime import date
from sqlalchemy.orm import Session
from football_platform.seasons.models.seasons_model import Season


class SeasonService:
    def __init__(self, db: Session):
        self.db = db

    def get_all_seasons(self):
        """Most recent season first."""
        return (
            self.db.query(Season)
            .order_by(Season.start_date.desc(), Season.season_id.desc())
            .all()
        )

    def create_season(self, league_id: int, season_year: str, start_date: date, end_date: date):
        season = Season(
            league_id=league_id,
            season_year=season_year,
            start_date=start_date,
            end_date=end_date,
        )
        try:
            self.db.add(season)
            self.db.commit()
            self.db.refresh(season)
        except Exception:
            self.db.rollback()
            raise
        return season

    def delete_season(self, season_id: int):
        try:
            self.db.query(Season).filter(Season.season_id == season_id).delete()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    @staticmethod
    def to_dict(season: Season) -> dict:
        return {
            "season_id": season.season_id,
            "league_id": season.league_id,
            "season_year": season.season_year,
            "start_date": season.start_date.isoformat() if season.start_date else None,
            "end_date": season.end_date.isoformat() if season.end_date else None,
        }
