from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class Season(Base):
    __tablename__ = "seasons"

    season_id = Column(Integer, primary_key=True, index=True)
    league_id = Column(Integer, index=True)  # leagues.league_id, unconstrained
    season_year = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    league = relationship(
        "League", back_populates="seasons",
        primaryjoin="League.league_id == foreign(Season.league_id)",
    )
    matches = relationship(
        "Match", back_populates="season",
        primaryjoin="Season.season_id == foreign(Match.season_id)",
    )
