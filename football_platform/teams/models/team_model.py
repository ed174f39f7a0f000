from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class Team(Base):
    __tablename__ = "teams"

    team_id = Column(Integer, primary_key=True, index=True)
    league_id = Column(Integer)  # leagues.league_id, unconstrained
    team_name = Column(String, nullable=False)
    city = Column(String)
    stadium = Column(String)
    founded_year = Column(Integer)

    league = relationship(
        "League", back_populates="teams",
        primaryjoin="League.league_id == foreign(Team.league_id)",
    )
    players = relationship(
        "Player", back_populates="team",
        primaryjoin="Team.team_id == foreign(Player.team_id)",
    )
    match_rows = relationship(
        "MatchTeam", back_populates="team",
        primaryjoin="Team.team_id == foreign(MatchTeam.team_id)",
    )
