from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class League(Base):
    __tablename__ = "leagues"

    league_id = Column(Integer, primary_key=True, index=True)
    league_name = Column(String, nullable=False)
    country = Column(String, nullable=False)

    # Teams and seasons keep their league_id when the league is deleted
    teams = relationship(
        "Team", back_populates="league",
        primaryjoin="League.league_id == foreign(Team.league_id)",
    )
    seasons = relationship(
        "Season", back_populates="league",
        primaryjoin="League.league_id == foreign(Season.league_id)",
    )
