from sqlalchemy import Column, Integer, String, Float, Date, Time, ForeignKey
from sqlalchemy.orm import relationship
from football_platform.core.database import Base

class Match(Base):
    __tablename__ = "matches"

    match_id = Column(Integer, primary_key=True, index=True)
    season_id = Column(Integer, index=True)  # seasons.season_id, unconstrained
    match_date = Column(Date)
    match_time = Column(Time)
    venue = Column(String)

    season = relationship(
        "Season", back_populates="matches",
        primaryjoin="Season.season_id == foreign(Match.season_id)",
    )
    teams = relationship("MatchTeam", back_populates="match")
    player_stats = relationship("PlayerStat", back_populates="match")


class MatchTeam(Base):
    """One team's side of a match: goals, role and the write-time result tag."""
    __tablename__ = "match_teams"

    match_id = Column(Integer, ForeignKey("matches.match_id"), primary_key=True)
    team_id = Column(Integer, primary_key=True, index=True)  # teams.team_id, unconstrained
    team_role = Column(String)  # home / away
    goals_scored = Column(Integer)
    possession_percentage = Column(Float)
    result = Column(String)  # win / loss / draw

    match = relationship("Match", back_populates="teams")
    team = relationship(
        "Team", back_populates="match_rows",
        primaryjoin="Team.team_id == foreign(MatchTeam.team_id)",
    )
